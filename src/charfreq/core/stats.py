# src/charfreq/core/stats.py
import statistics
from typing import List, Mapping, Optional, Sequence, Tuple

from charfreq.config import SPACE
from charfreq.models import FrequencySummary

def non_space_frequencies(table: Mapping[str, int]) -> List[int]:
    """Counts of every key except the space character, in table order."""
    return [count for char, count in table.items() if char != SPACE]

def extremes(table: Mapping[str, int]) -> Tuple[List[str], int, List[str], int]:
    """
    Finds the most and least common non-space characters.
    Every key reaching an extreme is returned, in table order, so ties
    produce several characters.
    """
    max_count = 0
    min_count = None
    most_common: List[str] = []
    least_common: List[str] = []

    for char, count in table.items():
        if char == SPACE:
            continue

        if count > max_count:
            max_count = count
            most_common = [char]
        elif count == max_count:
            most_common.append(char)

        if min_count is None or count < min_count:
            min_count = count
            least_common = [char]
        elif count == min_count:
            least_common.append(char)

    if min_count is None:
        raise ValueError("no non-space characters in table")

    return most_common, max_count, least_common, min_count

def mean(freqs: Sequence[int]) -> float:
    if not freqs:
        raise ValueError("mean of empty frequency list")
    return statistics.fmean(freqs)

def median(freqs: Sequence[int]) -> float:
    # statistics.median sorts its own copy; the caller's sequence is untouched
    if not freqs:
        raise ValueError("median of empty frequency list")
    return float(statistics.median(freqs))

def std_dev(freqs: Sequence[int], mu: Optional[float] = None) -> float:
    """Population standard deviation, sqrt(sum((f - mu)^2) / n)."""
    if not freqs:
        raise ValueError("standard deviation of empty frequency list")
    return float(statistics.pstdev(freqs, mu))

def summarize(table: Mapping[str, int]) -> Optional[FrequencySummary]:
    """
    Builds the verbose-report statistics for a table.
    Returns None when the table holds no non-space characters
    (empty file, or a file made only of spaces).
    """
    freqs = non_space_frequencies(table)
    if not freqs:
        return None

    most_common, max_count, least_common, min_count = extremes(table)
    mu = mean(freqs)

    return FrequencySummary(
        most_common=tuple(most_common),
        max_count=max_count,
        least_common=tuple(least_common),
        min_count=min_count,
        mean=mu,
        median=median(freqs),
        std_dev=std_dev(freqs, mu),
        size=len(freqs),
    )
