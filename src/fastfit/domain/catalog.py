"""Domain models for the menu catalog."""

from dataclasses import dataclass, field
from uuid import UUID

MACRO_UNIT = "g"


@dataclass(frozen=True)
class MenuItem:
    """A single menu item loaded from the nutrition dataset."""

    id: UUID
    restaurant_name: str
    name: str
    calories: int
    protein: str
    carbs: str
    fat: str
    tags: tuple[str, ...] = ()
    glyph: str = ""

    @property
    def protein_g(self) -> float:
        return parse_grams(self.protein)

    @property
    def carbs_g(self) -> float:
        return parse_grams(self.carbs)

    @property
    def fat_g(self) -> float:
        return parse_grams(self.fat)


@dataclass(frozen=True)
class Catalog:
    """Immutable set of menu items plus the normalized brands they cover."""

    items: tuple[MenuItem, ...] = ()
    brands: frozenset[str] = field(default_factory=frozenset)
    source: str = "empty"

    def get(self, item_id: UUID) -> MenuItem | None:
        """Return the item with the given id, if present."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None


@dataclass(frozen=True)
class CatalogState:
    """Snapshot observed by catalog readers."""

    loading: bool
    catalog: Catalog


def parse_grams(value: str) -> float:
    """Parse a gram string such as ``"3.5g"``; unparsable values give zero."""
    cleaned = value.strip().removesuffix(MACRO_UNIT).strip()
    try:
        return float(cleaned)
    except ValueError:
        return 0.0
