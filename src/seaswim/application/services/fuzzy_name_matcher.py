"""Name-based station resolution.

RWS location names are free text ("Hoek.v.Holland meetpaal", "Vlissingen
havenmond", "Valkenburg buitenhaven zuidelijk") while weather stations carry
short place names ("Hoek van Holland", "Vlissingen", "Valkenburg"). Stations
are resolved in stages and the first stage that produces a hit wins:

1. exact match on the first word,
2. abbreviated compound match for dotted names ("Hoek.v.Holland" ~ "Hoek van Holland"),
3. fuzzy match on the first word (or the compound) within an edit-distance tolerance,
4. the network's default station.
"""

import logging
import re
from collections.abc import Sequence

from seaswim.domain.models.weather_station import WeatherStation

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 3

_SEPARATORS = re.compile(r"[.\-_/]")
_WHITESPACE = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    """Lower-case a name and treat dots, dashes, underscores and slashes as word breaks."""
    normalized = _SEPARATORS.sub(" ", name.lower())
    return _WHITESPACE.sub(" ", normalized).strip()


def tokenize_name(name: str) -> list[str]:
    """Split a name into normalized words."""
    normalized = normalize_name(name)
    return normalized.split(" ") if normalized else []


def dotted_compound(name: str) -> list[str]:
    """Return the words of the first dot-joined chunk of a name, if any.

    "Hoek.v.Holland meetpaal" -> ["hoek", "v", "holland"]
    """
    for chunk in name.lower().split():
        if "." in chunk:
            words = tokenize_name(chunk)
            if len(words) > 1:
                return words
    return []


def damerau_levenshtein(a: str, b: str) -> int:
    """Edit distance counting insertions, deletions, substitutions and adjacent swaps.

    This is the optimal string alignment variant: no substring is edited twice.
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous_previous: list[int] = []
    previous = list(range(len(b) + 1))
    for i in range(1, len(a) + 1):
        current = [i] + [0] * len(b)
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            current[j] = min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + cost,  # substitution
            )
            if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                current[j] = min(current[j], previous_previous[j - 2] + 1)
        previous_previous, previous = previous, current
    return previous[len(b)]


def _abbreviates(compound: list[str], station_words: list[str]) -> bool:
    """Check whether each compound word equals or abbreviates the station word at its position."""
    if len(compound) != len(station_words):
        return False
    return all(full.startswith(word) for word, full in zip(compound, station_words))


class FuzzyNameMatcher:
    """Resolves free-text location names to weather stations."""

    def __init__(self, default_station_id: str | None, tolerance: int = DEFAULT_TOLERANCE) -> None:
        """Initialize the matcher.

        Args:
            default_station_id: Station returned when no name matches, if it is in the catalog.
            tolerance: Largest edit distance still accepted by the fuzzy stage.
        """
        self._default_station_id = default_station_id
        self._tolerance = tolerance

    def find_matching_station(
        self, free_text: str, catalog: Sequence[WeatherStation]
    ) -> WeatherStation | None:
        """Find the station whose name best matches the free text.

        Returns None only when nothing matched and the default station is not
        in the catalog (in particular, for an empty catalog).
        """
        if not catalog:
            return None

        words = tokenize_name(free_text)
        if words:
            station_words = [(station, tokenize_name(station.name)) for station in catalog]
            match = (
                self._match_first_word(words[0], station_words)
                or self._match_compound(dotted_compound(free_text), station_words)
                or self._match_fuzzy(words[0], dotted_compound(free_text), station_words)
            )
            if match is not None:
                return match

        default = self._find_default(catalog)
        logger.debug(f"No station name matches '{free_text}', using default station")
        return default

    def _match_first_word(
        self, first_word: str, station_words: list[tuple[WeatherStation, list[str]]]
    ) -> WeatherStation | None:
        for station, words in station_words:
            if words and words[0] == first_word:
                logger.debug(f"Exact first-word match '{first_word}' -> {station.name}")
                return station
        return None

    def _match_compound(
        self, compound: list[str], station_words: list[tuple[WeatherStation, list[str]]]
    ) -> WeatherStation | None:
        if not compound:
            return None
        for station, words in station_words:
            if _abbreviates(compound, words):
                logger.debug(f"Compound match '{' '.join(compound)}' -> {station.name}")
                return station
        return None

    def _match_fuzzy(
        self,
        first_word: str,
        compound: list[str],
        station_words: list[tuple[WeatherStation, list[str]]],
    ) -> WeatherStation | None:
        joined_compound = " ".join(compound)
        best_match = None
        best_distance = self._tolerance + 1

        for station, words in station_words:
            if not words:
                continue
            distance = damerau_levenshtein(first_word, words[0])
            if joined_compound:
                distance = min(distance, damerau_levenshtein(joined_compound, " ".join(words)))
            # Strict comparison keeps the first of equally close stations
            if distance < best_distance:
                best_distance = distance
                best_match = station

        if best_match is not None:
            logger.debug(
                f"Fuzzy match '{first_word}' -> {best_match.name} (distance {best_distance})"
            )
        return best_match

    def _find_default(self, catalog: Sequence[WeatherStation]) -> WeatherStation | None:
        if self._default_station_id is None:
            return None
        for station in catalog:
            if station.id == self._default_station_id:
                return station
        return None
