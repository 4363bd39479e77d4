# src/charfreq/models.py
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional, Tuple

@dataclass(frozen=True)
class CountResult:
    """Outcome of counting one file. `error` is set only when the file could not be opened."""
    path: str
    table: Counter = field(default_factory=Counter)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

@dataclass(frozen=True)
class FrequencySummary:
    """Aggregate statistics over the non-space entries of a frequency table."""
    most_common: Tuple[str, ...]
    max_count: int
    least_common: Tuple[str, ...]
    min_count: int
    mean: float
    median: float
    std_dev: float
    size: int
