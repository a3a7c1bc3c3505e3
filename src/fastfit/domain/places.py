"""Domain models for nearby places."""

from dataclasses import dataclass

METERS_PER_MILE = 1609.34


@dataclass(frozen=True)
class NearbyPlace:
    """External place reported by the location collaborator."""

    id: str
    name: str
    distance_meters: float = 0.0
    category: str = "Food Node"


@dataclass(frozen=True)
class RestaurantMatch:
    """Nearby place flagged with whether the catalog knows its brand."""

    place: NearbyPlace
    supported: bool

    @property
    def distance_label(self) -> str:
        return f"{self.place.distance_meters / METERS_PER_MILE:.1f} mi"
