"""Domain models for activity inputs."""

from dataclasses import dataclass

MAX_STEPS = 20000
MAX_STRENGTH_MINUTES = 120


@dataclass(frozen=True)
class ActivityRecord:
    """Workout received from the external activity feed."""

    name: str
    category: str
    calories: int
    duration: str
    icon: str


@dataclass(frozen=True)
class FeedState:
    """Connection state of the activity feed."""

    connected: bool = False
    activities: tuple[ActivityRecord, ...] = ()


@dataclass
class ActivityInputs:
    """User-adjustable activity levels for the current day."""

    steps: float = 6500
    strength_minutes: float = 0

    def __post_init__(self) -> None:
        self.steps = _clamp(self.steps, MAX_STEPS)
        self.strength_minutes = _clamp(self.strength_minutes, MAX_STRENGTH_MINUTES)

    def update(
        self, steps: float | None = None, strength_minutes: float | None = None
    ) -> None:
        """Set new activity levels, clamped to their allowed ranges."""
        if steps is not None:
            self.steps = _clamp(steps, MAX_STEPS)
        if strength_minutes is not None:
            self.strength_minutes = _clamp(strength_minutes, MAX_STRENGTH_MINUTES)


def _clamp(value: float, upper: float) -> float:
    return min(max(float(value), 0.0), float(upper))
