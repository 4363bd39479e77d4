# tests/test_stats.py

import sys
import math
import pytest
from collections import Counter
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from charfreq.core import stats
from charfreq.core.report import display_char, format_report

# --- Test 1: Helpers ---

def test_non_space_frequencies_skips_space():
    table = Counter({"a": 3, " ": 10, "b": 1})
    assert stats.non_space_frequencies(table) == [3, 1]

def test_extremes_collects_ties_in_table_order():
    table = Counter({"c": 1, "a": 4, " ": 9, "b": 4, "d": 1})

    most, max_count, least, min_count = stats.extremes(table)

    assert most == ["a", "b"]
    assert max_count == 4
    assert least == ["c", "d"]
    assert min_count == 1

def test_extremes_without_non_space_raises():
    with pytest.raises(ValueError):
        stats.extremes(Counter({" ": 3}))

def test_median_even_and_odd():
    assert stats.median([3, 1, 2]) == 2.0
    assert stats.median([4, 1, 3, 2]) == 2.5

def test_median_does_not_reorder_input():
    freqs = [5, 1, 3]
    stats.median(freqs)
    assert freqs == [5, 1, 3]

def test_std_dev_is_population():
    freqs = [2, 4, 4, 4, 5, 5, 7, 9]
    assert stats.mean(freqs) == 5.0
    assert stats.std_dev(freqs) == pytest.approx(2.0)
    assert stats.std_dev(freqs, 5.0) == pytest.approx(2.0)

@pytest.mark.parametrize("func", [stats.mean, stats.median, stats.std_dev])
def test_empty_input_raises(func):
    with pytest.raises(ValueError):
        func([])

# --- Test 2: Summary ---

def test_summarize_xxy():
    summary = stats.summarize(Counter("xxy"))

    assert summary.most_common == ("x",)
    assert summary.max_count == 2
    assert summary.least_common == ("y",)
    assert summary.min_count == 1
    assert summary.mean == 1.5
    assert summary.median == 1.5
    assert summary.std_dev == pytest.approx(0.5)
    assert summary.size == 2

def test_summarize_ignores_space():
    summary = stats.summarize(Counter({"a": 2, "b": 2, " ": 1}))

    assert summary.most_common == ("a", "b")
    assert summary.least_common == ("a", "b")
    assert summary.mean == 2.0
    assert summary.median == 2.0
    assert summary.std_dev == 0.0

@pytest.mark.parametrize("table", [Counter(), Counter({" ": 4})])
def test_summarize_without_non_space_returns_none(table):
    assert stats.summarize(table) is None

def test_summary_values_are_finite():
    summary = stats.summarize(Counter("the quick brown fox"))
    assert all(math.isfinite(v) for v in (summary.mean, summary.median, summary.std_dev))

# --- Test 3: Report formatting ---

def test_display_char():
    assert display_char(" ") == "' '"
    assert display_char("a") == "a"
    assert display_char("\t") == "\\t"
    assert display_char("\r") == "\\r"
    assert display_char("\x00") == "\\x00"
    assert display_char("\xc3") == "\\xc3"

def test_format_report_order():
    lines = format_report(Counter({"q": 1, " ": 2}))

    assert lines == [
        "Character Frequencies:",
        "q -> 1",
        "' ' -> 2",
        "Most common non-space character(s): q (1 times)",
        "Least common non-space character(s): q (1 times)",
        "Mean frequency: 1",
        "Median frequency: 1",
        "Standard deviation: 0",
    ]
