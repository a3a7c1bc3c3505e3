"""Nutrition dataset parsing and catalog loading."""

import asyncio
import csv
import logging
from dataclasses import dataclass, field
from uuid import uuid4

from fastfit.adapters.dataset_source import DatasetSource, DatasetUnavailableError
from fastfit.domain.catalog import MACRO_UNIT, Catalog, CatalogState, MenuItem
from fastfit.services.matching import normalize

MIN_FIELDS = 13
HEADER_TOKENS = frozenset({"restaurant"})
BOM = "\ufeff"

_COL_RESTAURANT = 0
_COL_NAME = 1
_COL_CALORIES = 2
_COL_FAT = 4
_COL_CARBS = 9
_COL_PROTEIN = 12

HIGH_PROTEIN_MIN_G = 25
LOW_CARB_MAX_G = 35
LOW_CAL_MAX = 450

DEFAULT_GLYPH = "\U0001f37d\ufe0f"
_GLYPHS = (
    ("salad", "\U0001f957"),
    ("chicken", "\U0001f357"),
    ("burger", "\U0001f354"),
    ("taco", "\U0001f32e"),
)

FALLBACK_DATASET = """\
restaurant,item,calories,cal_fat,total_fat,sat_fat,trans_fat,cholesterol,sodium,total_carb,fiber,sugar,protein,vit_a,vit_c,calcium,salad
Mcdonalds,Artisan Grilled Chicken Sandwich,380,0,7,0,0,0,0,44,0,0,37,0,0,0,Other
Mcdonalds,Grilled Chicken Salad,350,0,15,0,0,0,0,12,0,0,38,0,0,0,Other
Taco Bell,Power Menu Bowl - Chicken,470,0,19,0,0,0,0,50,0,0,26,0,0,0,Other
Subway,Turkey Breast (6 inch),280,0,3.5,0,0,0,0,46,0,0,18,0,0,0,Other
Chick-fil-A,Grilled Chicken Sandwich,320,0,6,0,0,0,0,41,0,0,28,0,0,0,Other
"""

_logger = logging.getLogger(__name__)


def parse_catalog(text: str, source: str = "primary") -> Catalog:
    """Parse CSV text into a catalog, dropping rows that are too short.

    Each physical line is parsed on its own, so a stray quote or an oversized
    field costs only the line it sits on.
    """
    items: list[MenuItem] = []
    brands: set[str] = set()
    dropped = 0
    first = True
    for line in text.removeprefix(BOM).splitlines():
        if not line.strip():
            continue
        row = _parse_line(line)
        if first:
            first = False
            if row is not None and _is_header(row):
                continue
        if row is None or len(row) < MIN_FIELDS:
            dropped += 1
            continue
        item = _parse_row(row)
        brand = normalize(item.restaurant_name)
        if brand:
            brands.add(brand)
        items.append(item)

    if dropped:
        _logger.debug("Dropped %s malformed dataset rows", dropped)
    return Catalog(items=tuple(items), brands=frozenset(brands), source=source)



async def load_catalog(
    source: DatasetSource | None, fallback_text: str = FALLBACK_DATASET
) -> Catalog:
    """Read and parse the primary source, using the fallback table if needed."""
    origin = "fallback"
    text = fallback_text
    if source is None:
        _logger.info("No dataset source configured, using fallback")
    else:
        try:
            text = await source.read_text()
            origin = "primary"
        except DatasetUnavailableError as exc:
            _logger.warning("Primary dataset unavailable, using fallback: %s", exc)
    return await asyncio.to_thread(parse_catalog, text, origin)


@dataclass
class CatalogService:
    """Owns the session catalog and publishes it once fully loaded."""

    source: DatasetSource | None = None
    fallback_text: str = FALLBACK_DATASET
    _state: CatalogState = field(
        default_factory=lambda: CatalogState(loading=True, catalog=Catalog())
    )
    _generation: int = 0

    @property
    def state(self) -> CatalogState:
        return self._state

    @property
    def catalog(self) -> Catalog:
        return self._state.catalog

    @property
    def is_loading(self) -> bool:
        return self._state.loading

    async def load(self) -> Catalog:
        """Load the dataset and publish the resulting catalog atomically.

        Only the most recently started load publishes; an older one that
        completes later returns the current catalog untouched.
        """
        self._generation += 1
        generation = self._generation
        try:
            catalog = await load_catalog(self.source, self.fallback_text)
        except Exception:
            _logger.exception("Catalog load failed, publishing fallback")
            catalog = self._fallback_catalog()

        if generation != self._generation:
            _logger.info("Discarding catalog from superseded load")
            return self.catalog

        self._state = CatalogState(loading=False, catalog=catalog)
        _logger.info(
            "Catalog ready: source=%s items=%s brands=%s",
            catalog.source,
            len(catalog.items),
            len(catalog.brands),
        )
        return catalog

    async def reload(self) -> Catalog:
        """Replace the catalog wholesale; readers keep the old one meanwhile."""
        return await self.load()

    def _fallback_catalog(self) -> Catalog:
        try:
            return parse_catalog(self.fallback_text, "fallback")
        except Exception:
            _logger.exception("Fallback dataset unusable, publishing empty catalog")
            return Catalog()


def _parse_line(line: str) -> list[str] | None:
    try:
        return next(csv.reader([line]), [])
    except csv.Error:
        return None


def _is_header(row: list[str]) -> bool:
    return bool(row) and row[0].strip().lstrip(BOM).lower() in HEADER_TOKENS



def _parse_row(row: list[str]) -> MenuItem:
    name = row[_COL_NAME].strip()
    calories = _parse_int(row[_COL_CALORIES])
    protein_raw = row[_COL_PROTEIN].strip()
    carbs_raw = row[_COL_CARBS].strip()
    return MenuItem(
        id=uuid4(),
        restaurant_name=row[_COL_RESTAURANT].strip(),
        name=name,
        calories=calories,
        protein=_grams(protein_raw),
        carbs=_grams(carbs_raw),
        fat=_grams(row[_COL_FAT].strip()),
        tags=_derive_tags(_parse_float(protein_raw), _parse_float(carbs_raw), calories),
        glyph=_derive_glyph(name),
    )


def _grams(raw: str) -> str:
    return (raw or "0") + MACRO_UNIT


def _derive_tags(protein_g: float, carbs_g: float, calories: int) -> tuple[str, ...]:
    tags: list[str] = []
    if protein_g > HIGH_PROTEIN_MIN_G:
        tags.append("High Protein")
    if carbs_g < LOW_CARB_MAX_G:
        tags.append("Low Carb")
    if calories < LOW_CAL_MAX:
        tags.append("Low Cal")
    return tuple(tags)


def _derive_glyph(name: str) -> str:
    lowered = name.lower()
    for keyword, glyph in _GLYPHS:
        if keyword in lowered:
            return glyph
    return DEFAULT_GLYPH


def _parse_int(value: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        return 0


def _parse_float(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        return 0.0
