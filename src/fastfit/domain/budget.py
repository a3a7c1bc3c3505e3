"""Domain models for the daily budget."""

from dataclasses import dataclass

from fastfit.domain.ledger import ConsumedTotals


@dataclass(frozen=True)
class BudgetState:
    """Daily goals and remaining calories derived from current inputs."""

    base_calorie_goal: int
    base_protein_goal: int
    carb_goal: int
    burn_from_steps: int
    burn_from_strength: int
    burn_from_feed: int
    is_strength_day: bool
    total_calorie_goal: int
    total_protein_goal: int
    consumed: ConsumedTotals
    remaining_calories: int
