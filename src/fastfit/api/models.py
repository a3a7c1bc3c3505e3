"""Pydantic models for the HTTP API."""

from uuid import UUID

from pydantic import BaseModel, Field

from fastfit.domain.activity import MAX_STEPS, MAX_STRENGTH_MINUTES
from fastfit.domain.budget import BudgetState
from fastfit.domain.catalog import MenuItem
from fastfit.domain.ledger import ConsumptionRecord
from fastfit.domain.places import NearbyPlace, RestaurantMatch


class MenuItemOut(BaseModel):
    """Menu item as shown to clients."""

    id: UUID
    restaurant_name: str
    name: str
    calories: int
    protein: str
    carbs: str
    fat: str
    protein_g: float
    carbs_g: float
    fat_g: float
    tags: list[str]
    glyph: str

    @classmethod
    def from_item(cls, item: MenuItem) -> "MenuItemOut":
        return cls(
            id=item.id,
            restaurant_name=item.restaurant_name,
            name=item.name,
            calories=item.calories,
            protein=item.protein,
            carbs=item.carbs,
            fat=item.fat,
            protein_g=item.protein_g,
            carbs_g=item.carbs_g,
            fat_g=item.fat_g,
            tags=list(item.tags),
            glyph=item.glyph,
        )


class CatalogOut(BaseModel):
    """Catalog loading state and contents."""

    loading: bool
    source: str
    item_count: int
    items: list[MenuItemOut]


class PlaceIn(BaseModel):
    """Nearby place reported by the location layer."""

    id: str
    name: str
    distance_meters: float = Field(default=0.0, ge=0.0)
    category: str = "Food Node"

    def to_domain(self) -> NearbyPlace:
        return NearbyPlace(
            id=self.id,
            name=self.name,
            distance_meters=self.distance_meters,
            category=self.category,
        )


class RestaurantMatchOut(BaseModel):
    """Nearby place with its catalog support flag."""

    id: str
    name: str
    distance: str
    category: str
    supported: bool

    @classmethod
    def from_match(cls, match: RestaurantMatch) -> "RestaurantMatchOut":
        return cls(
            id=match.place.id,
            name=match.place.name,
            distance=match.distance_label,
            category=match.place.category,
            supported=match.supported,
        )


class RecommendationRequest(BaseModel):
    """Names of restaurants near the user."""

    nearby: list[str] = Field(default_factory=list)


class ActivityUpdate(BaseModel):
    """New slider positions; omitted fields keep their value."""

    steps: float | None = Field(default=None, ge=0, le=MAX_STEPS)
    strength_minutes: float | None = Field(default=None, ge=0, le=MAX_STRENGTH_MINUTES)


class ActivityRecordOut(BaseModel):
    name: str
    category: str
    calories: int
    duration: str
    icon: str


class ActivityOut(BaseModel):
    """Current activity inputs and feed state."""

    steps: float
    strength_minutes: float
    feed_connected: bool
    feed_activities: list[ActivityRecordOut]


class ConsumedOut(BaseModel):
    calories: int
    protein_g: float
    carbs_g: float
    fat_g: float


class BudgetOut(BaseModel):
    """Budget figures for the current inputs."""

    base_calorie_goal: int
    base_protein_goal: int
    carb_goal: int
    burn_from_steps: int
    burn_from_strength: int
    burn_from_feed: int
    is_strength_day: bool
    total_calorie_goal: int
    total_protein_goal: int
    remaining_calories: int
    consumed: ConsumedOut

    @classmethod
    def from_state(cls, state: BudgetState) -> "BudgetOut":
        return cls(
            base_calorie_goal=state.base_calorie_goal,
            base_protein_goal=state.base_protein_goal,
            carb_goal=state.carb_goal,
            burn_from_steps=state.burn_from_steps,
            burn_from_strength=state.burn_from_strength,
            burn_from_feed=state.burn_from_feed,
            is_strength_day=state.is_strength_day,
            total_calorie_goal=state.total_calorie_goal,
            total_protein_goal=state.total_protein_goal,
            remaining_calories=state.remaining_calories,
            consumed=ConsumedOut(
                calories=state.consumed.calories,
                protein_g=state.consumed.protein_g,
                carbs_g=state.consumed.carbs_g,
                fat_g=state.consumed.fat_g,
            ),
        )


class LedgerAdd(BaseModel):
    item_id: UUID


class LedgerRecordOut(BaseModel):
    """Consumed item in insertion order."""

    id: UUID
    item: MenuItemOut

    @classmethod
    def from_record(cls, record: ConsumptionRecord) -> "LedgerRecordOut":
        return cls(id=record.id, item=MenuItemOut.from_item(record.item))
