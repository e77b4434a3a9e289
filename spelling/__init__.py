"""
spelling: approximate dictionary lookup by Levenshtein distance.

Main flow:
- ``distance`` / ``distance_bounded`` compare two strings;
- ``suggest`` scores every dictionary entry against a word and returns the
  entries within the bound, closest first;
- ``suggest_parallel`` does the same across a worker pool;
- ``spellcheck`` takes a newline-separated word list and the package config.

Config (``spelling.json`` or ``$SPELLING_CONFIG``):
{
  "max_distance": 3,
  "log_level": "WARNING",
  "log_file": null,
  "parallel": {"enabled": false, "max_workers": 4, "chunk_size": 2048}
}
"""

from __future__ import annotations

from .checker import spellcheck
from .distance import distance, distance_bounded
from .exceptions import ConfigError, InvalidBoundError, SpellingError
from .models import Suggestion
from .parallel import rank_parallel, suggest_parallel
from .suggest import rank, split_dictionary, suggest

__all__ = [
    "distance",
    "distance_bounded",
    "rank",
    "suggest",
    "rank_parallel",
    "suggest_parallel",
    "split_dictionary",
    "spellcheck",
    "Suggestion",
    "SpellingError",
    "InvalidBoundError",
    "ConfigError",
]
