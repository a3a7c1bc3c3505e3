"""Menu item filtering and ranking against the calorie budget."""

from collections.abc import Iterable
from enum import StrEnum

from fastfit.domain.catalog import MenuItem
from fastfit.services.matching import names_match, normalize

LOW_CAL_CEILING = 1000.0
PROTEIN_WEIGHT = 10.0
LOW_CARB_CEILING = 100.0
LOW_CARB_WEIGHT = 5.0


class MenuFilter(StrEnum):
    """Menu sort criteria the user can toggle independently."""

    LOW_CAL = "low_cal"
    HIGH_PROTEIN = "high_protein"
    LOW_CARB = "low_carb"


def fits_budget(item: MenuItem, calorie_budget: int) -> bool:
    """Zero-calorie rows are placeholders and never qualify."""
    return 0 < item.calories <= calorie_budget


def recommend(
    items: Iterable[MenuItem],
    nearby_names: Iterable[str],
    calorie_budget: int,
    prioritize_protein: bool = False,  # noqa: ARG001
) -> list[MenuItem]:
    """Return items sold nearby that fit the budget, highest protein first.

    ``prioritize_protein`` does not change the order yet; both settings rank
    by protein.
    """
    nearby = [normalize(name) for name in nearby_names]
    qualifying = [
        item
        for item in items
        if fits_budget(item, calorie_budget)
        and any(names_match(normalize(item.restaurant_name), key) for key in nearby)
    ]
    return sorted(qualifying, key=lambda item: item.protein_g, reverse=True)


def items_for_restaurant(
    items: Iterable[MenuItem],
    name: str,
    calorie_budget: int,
    filters: Iterable[MenuFilter] = (),
) -> list[MenuItem]:
    """Return one restaurant's items within budget.

    Without filters the cheapest items come first; with filters items are
    ordered by their combined score.
    """
    target = normalize(name)
    available = [
        item
        for item in items
        if fits_budget(item, calorie_budget)
        and names_match(normalize(item.restaurant_name), target)
    ]
    selected = frozenset(filters)
    if not selected:
        return sorted(available, key=lambda item: item.calories)
    return sorted(available, key=lambda item: score(item, selected), reverse=True)


def score(item: MenuItem, filters: frozenset[MenuFilter]) -> float:
    """Weighted sum of the selected criteria; selections compound."""
    total = 0.0
    if MenuFilter.LOW_CAL in filters:
        total += LOW_CAL_CEILING - item.calories
    if MenuFilter.HIGH_PROTEIN in filters:
        total += item.protein_g * PROTEIN_WEIGHT
    if MenuFilter.LOW_CARB in filters:
        total += (LOW_CARB_CEILING - item.carbs_g) * LOW_CARB_WEIGHT
    return total
