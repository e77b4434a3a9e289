"""Custom exception hierarchy for the spelling package.

"Candidate exceeds the bound" is not an error: the kernels return ``None``
for it. Exceptions here cover bad arguments at the public boundary and
unreadable configuration only.
"""

from __future__ import annotations


class SpellingError(Exception):
    """Base exception for all spelling errors."""


class InvalidBoundError(SpellingError, ValueError):
    """A distance bound that is not a non-negative integer."""


class ConfigError(SpellingError):
    """A configuration file exists but could not be read."""
