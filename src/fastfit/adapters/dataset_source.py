"""Sources for the raw nutrition dataset text."""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import httpx


class DatasetUnavailableError(Exception):
    """Raised when the primary dataset cannot be read."""


class DatasetSource(Protocol):
    """Interface for reading raw dataset text."""

    async def read_text(self) -> str:
        """Return the dataset text or raise DatasetUnavailableError."""


@dataclass
class FileDatasetSource(DatasetSource):
    """Dataset stored as a CSV file on disk."""

    path: Path

    async def read_text(self) -> str:
        """Read the file in a worker thread."""
        try:
            return await asyncio.to_thread(self.path.read_text, encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            raise DatasetUnavailableError(f"cannot read {self.path}: {exc}") from exc


@dataclass
class HttpxDatasetSource(DatasetSource):
    """Dataset downloaded over HTTP."""

    url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, url: str) -> "HttpxDatasetSource":
        """Create a source with a managed httpx session."""
        return cls(url=url, http_client=httpx.AsyncClient())

    async def read_text(self) -> str:
        """Fetch the dataset body."""
        try:
            response = await self.http_client.get(self.url, timeout=15)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise DatasetUnavailableError(f"cannot fetch {self.url}: {exc}") from exc
        return response.text

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


@dataclass
class StaticDatasetSource(DatasetSource):
    """In-memory dataset; ``None`` stands for a declared absence."""

    text: str | None = None

    async def read_text(self) -> str:
        if self.text is None:
            raise DatasetUnavailableError("no dataset provided")
        return self.text
