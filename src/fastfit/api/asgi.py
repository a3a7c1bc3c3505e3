"""ASGI entrypoint for the FastFit API."""

from fastfit.api.app import create_app
from fastfit.containers import build_container

app = create_app(build_container())
