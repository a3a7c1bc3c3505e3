"""Daily calorie and protein budget derived from activity."""

import math
from collections.abc import Iterable
from dataclasses import dataclass

from fastfit.domain.activity import ActivityInputs, ActivityRecord, FeedState
from fastfit.domain.budget import BudgetState
from fastfit.domain.ledger import ConsumedTotals, ConsumptionRecord

CALORIES_PER_STEP = 0.04
CALORIES_PER_STRENGTH_MINUTE = 5.0
STRENGTH_DAY_MIN_MINUTES = 20
STRENGTH_DAY_PROTEIN_BONUS = 50


def burn_from_steps(steps: float) -> int:
    return math.floor(steps * CALORIES_PER_STEP)


def burn_from_strength(minutes: float) -> int:
    return math.floor(minutes * CALORIES_PER_STRENGTH_MINUTE)


def burn_from_feed(activities: Iterable[ActivityRecord], connected: bool) -> int:
    """Calories burned in feed activities; nothing counts while disconnected."""
    if not connected:
        return 0
    return sum(activity.calories for activity in activities)


def is_strength_day(minutes: float) -> bool:
    return minutes > STRENGTH_DAY_MIN_MINUTES


def consumed_totals(records: Iterable[ConsumptionRecord]) -> ConsumedTotals:
    """Sum calories and macros over the consumed items."""
    total = ConsumedTotals()
    for record in records:
        total = ConsumedTotals(
            calories=total.calories + record.item.calories,
            protein_g=total.protein_g + record.item.protein_g,
            carbs_g=total.carbs_g + record.item.carbs_g,
            fat_g=total.fat_g + record.item.fat_g,
        )
    return total


@dataclass(frozen=True)
class BudgetCalculator:
    """Computes the budget from baseline goals and current activity.

    Every call recomputes from its arguments, so the result always reflects
    the latest slider positions and ledger contents.
    """

    base_calorie_goal: int = 2200
    base_protein_goal: int = 150
    carb_goal: int = 200

    def total_calorie_goal(self, inputs: ActivityInputs, feed: FeedState) -> int:
        return (
            self.base_calorie_goal
            + burn_from_steps(inputs.steps)
            + burn_from_strength(inputs.strength_minutes)
            + burn_from_feed(feed.activities, feed.connected)
        )

    def total_protein_goal(self, inputs: ActivityInputs) -> int:
        if is_strength_day(inputs.strength_minutes):
            return self.base_protein_goal + STRENGTH_DAY_PROTEIN_BONUS
        return self.base_protein_goal

    def remaining_calories(
        self,
        inputs: ActivityInputs,
        feed: FeedState,
        records: Iterable[ConsumptionRecord],
    ) -> int:
        consumed = consumed_totals(records)
        return max(0, self.total_calorie_goal(inputs, feed) - consumed.calories)

    def evaluate(
        self,
        inputs: ActivityInputs,
        feed: FeedState,
        records: Iterable[ConsumptionRecord],
    ) -> BudgetState:
        """Return every budget figure for the current inputs."""
        consumed = consumed_totals(records)
        total_calories = self.total_calorie_goal(inputs, feed)
        return BudgetState(
            base_calorie_goal=self.base_calorie_goal,
            base_protein_goal=self.base_protein_goal,
            carb_goal=self.carb_goal,
            burn_from_steps=burn_from_steps(inputs.steps),
            burn_from_strength=burn_from_strength(inputs.strength_minutes),
            burn_from_feed=burn_from_feed(feed.activities, feed.connected),
            is_strength_day=is_strength_day(inputs.strength_minutes),
            total_calorie_goal=total_calories,
            total_protein_goal=self.total_protein_goal(inputs),
            consumed=consumed,
            remaining_calories=max(0, total_calories - consumed.calories),
        )
