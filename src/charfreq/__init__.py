# src/charfreq/__init__.py
from charfreq.core.textfile import TextFile, count_characters
from charfreq.models import CountResult, FrequencySummary

__all__ = ["TextFile", "count_characters", "CountResult", "FrequencySummary"]
