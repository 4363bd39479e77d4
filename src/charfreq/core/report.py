# src/charfreq/core/report.py
import sys
from typing import List, Mapping, Optional, TextIO

from charfreq.config import (
    BYTE_ENCODING,
    LEAST_COMMON_LABEL,
    MEAN_LABEL,
    MEDIAN_LABEL,
    MOST_COMMON_LABEL,
    NO_NON_SPACE_MESSAGE,
    REPORT_HEADER,
    SPACE,
    SPACE_DISPLAY,
    STD_DEV_LABEL,
)
from charfreq.core.stats import summarize
from charfreq.models import FrequencySummary

def display_char(char: str) -> str:
    """
    Human-readable form of a table key.
    The space prints as a quoted literal; other non-printable bytes
    (tabs, CR, control codes, 0x80+) print as their escape sequence.
    """
    if char == SPACE:
        return SPACE_DISPLAY
    if char.isprintable() and ord(char) < 0x80:
        return char
    return repr(char.encode(BYTE_ENCODING))[2:-1]

def _format_chars(chars) -> str:
    return " ".join(display_char(c) for c in chars)

def format_report(table: Mapping[str, int], summary: Optional[FrequencySummary] = None) -> List[str]:
    """Lines of the verbose report, in print order."""
    if summary is None:
        summary = summarize(table)

    lines = [REPORT_HEADER]
    for char, count in table.items():
        lines.append(f"{display_char(char)} -> {count}")

    if summary is None:
        lines.append(NO_NON_SPACE_MESSAGE)
        return lines

    lines.append(f"{MOST_COMMON_LABEL} {_format_chars(summary.most_common)} ({summary.max_count} times)")
    lines.append(f"{LEAST_COMMON_LABEL} {_format_chars(summary.least_common)} ({summary.min_count} times)")
    lines.append(f"{MEAN_LABEL} {summary.mean:g}")
    lines.append(f"{MEDIAN_LABEL} {summary.median:g}")
    lines.append(f"{STD_DEV_LABEL} {summary.std_dev:g}")
    return lines

def print_report(table: Mapping[str, int], file: TextIO = None) -> None:
    out = file if file is not None else sys.stdout
    for line in format_report(table):
        print(line, file=out)
