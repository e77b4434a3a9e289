from __future__ import annotations

from typing import Iterable, List, Sequence

from .distance import check_bound, distance_bounded
from .logger import get_logger
from .models import Suggestion

logger = get_logger(__name__)


def split_dictionary(text: str) -> List[str]:
    """Split a newline-delimited block into candidates.

    A trailing newline does not produce an extra empty candidate; interior
    blank lines do (the empty string is a valid dictionary entry).
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def as_sequence(dictionary: Iterable[str]) -> Sequence[str]:
    if isinstance(dictionary, (list, tuple)):
        return dictionary
    return list(dictionary)


def rank(dictionary: Iterable[str], word: str, max_distance: int) -> List[Suggestion]:
    """Return every candidate within *max_distance* of *word*, closest first.

    The bound is inclusive. Candidates with equal distance keep their
    dictionary order.
    """
    check_bound(max_distance)
    candidates = as_sequence(dictionary)
    out: List[Suggestion] = []
    for index, candidate in enumerate(candidates):
        dist = distance_bounded(word, candidate, max_distance)
        if dist is None:
            continue
        out.append(Suggestion(candidate=candidate, distance=dist, index=index))
    out.sort(key=Suggestion.sort_key)
    logger.debug(
        "rank %r (max_distance=%d): %d of %d candidates kept",
        word,
        max_distance,
        len(out),
        len(candidates),
    )
    return out


def suggest(dictionary: Iterable[str], word: str, max_distance: int) -> List[str]:
    return [s.candidate for s in rank(dictionary, word, max_distance)]
