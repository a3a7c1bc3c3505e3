"""Per-session context tying the core components together."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from uuid import UUID

from fastfit.domain.activity import ActivityInputs
from fastfit.domain.budget import BudgetState
from fastfit.domain.catalog import MenuItem
from fastfit.domain.ledger import ConsumptionRecord
from fastfit.domain.places import NearbyPlace, RestaurantMatch
from fastfit.services import ranking
from fastfit.services.activity_feed import ActivityFeedService
from fastfit.services.budget import BudgetCalculator
from fastfit.services.dataset import CatalogService
from fastfit.services.ledger import ConsumptionLedger
from fastfit.services.matching import NameMatcher
from fastfit.services.ranking import MenuFilter


@dataclass
class SessionContext:
    """State owned by a single user session.

    Readers always go through the catalog service's current state, and every
    budget figure is recomputed from the live inputs.
    """

    catalog_service: CatalogService
    activity_feed: ActivityFeedService
    calculator: BudgetCalculator = field(default_factory=BudgetCalculator)
    ledger: ConsumptionLedger = field(default_factory=ConsumptionLedger)
    activity: ActivityInputs = field(default_factory=ActivityInputs)

    @property
    def matcher(self) -> NameMatcher:
        return NameMatcher(self.catalog_service.catalog.brands)

    def budget(self) -> BudgetState:
        return self.calculator.evaluate(
            self.activity, self.activity_feed.state, self.ledger.records
        )

    def match_places(self, places: Iterable[NearbyPlace]) -> list[RestaurantMatch]:
        return self.matcher.match_places(places)

    def recommendations(self, nearby_names: Iterable[str]) -> list[MenuItem]:
        """Rank nearby items against the remaining calorie budget."""
        budget = self.budget()
        return ranking.recommend(
            self.catalog_service.catalog.items,
            nearby_names,
            calorie_budget=budget.remaining_calories,
            prioritize_protein=budget.is_strength_day,
        )

    def restaurant_items(
        self, name: str, filters: Iterable[MenuFilter] = ()
    ) -> list[MenuItem]:
        return ranking.items_for_restaurant(
            self.catalog_service.catalog.items,
            name,
            calorie_budget=self.budget().remaining_calories,
            filters=filters,
        )

    def log_item(self, item_id: UUID) -> ConsumptionRecord | None:
        """Add a catalog item to the ledger; unknown ids are ignored."""
        item = self.catalog_service.catalog.get(item_id)
        if item is None:
            return None
        return self.ledger.add(item)
