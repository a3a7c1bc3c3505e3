"""Restaurant name normalization and matching.

Place names coming from map searches rarely agree with the dataset spelling
("McDonald's" vs "Mcdonalds", "Chick-fil-A" vs "Chick fil A"). Names are
compared after normalization with a bidirectional containment rule: a query
matches a brand when either string contains the other. The rule tolerates
abbreviated and suffixed variants at the cost of false positives for very
short names, which is accepted.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from fastfit.domain.places import NearbyPlace, RestaurantMatch

_STRIPPED_CHARS = str.maketrans("", "", "'’ -")

_logger = logging.getLogger(__name__)


def normalize(text: str) -> str:
    """Lower-case and drop apostrophes, spaces and hyphens."""
    return text.lower().translate(_STRIPPED_CHARS)


def names_match(first: str, second: str) -> bool:
    """Return true when one normalized key contains the other."""
    if not first or not second:
        return False
    return first in second or second in first


def matches(restaurant: str, candidates: Iterable[str]) -> bool:
    """Return true when the restaurant matches any candidate name."""
    key = normalize(restaurant)
    return any(names_match(key, normalize(candidate)) for candidate in candidates)


@dataclass(frozen=True)
class NameMatcher:
    """Decides whether external place names belong to the catalog."""

    brands: frozenset[str] = field(default_factory=frozenset)

    def is_supported(self, name: str) -> bool:
        """Return true if the name matches a known brand."""
        target = normalize(name)
        return any(names_match(target, brand) for brand in self.brands)

    def match_places(self, places: Iterable[NearbyPlace]) -> list[RestaurantMatch]:
        """Flag each place with whether its brand is in the catalog."""
        results = [
            RestaurantMatch(place=place, supported=self.is_supported(place.name))
            for place in places
        ]
        _logger.debug(
            "Matched places: total=%s supported=%s",
            len(results),
            sum(1 for result in results if result.supported),
        )
        return results

    def supported_places(self, places: Iterable[NearbyPlace]) -> list[NearbyPlace]:
        """Return only the places whose brand is in the catalog."""
        return [match.place for match in self.match_places(places) if match.supported]
