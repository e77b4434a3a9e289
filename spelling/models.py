from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Suggestion:
    """A dictionary entry that passed the distance bound."""

    candidate: str  # the caller's own string object, never a copy
    distance: int
    index: int  # position in the source dictionary

    def sort_key(self) -> tuple:
        return (self.distance, self.index)
