"""Levenshtein distance kernels.

Two entry points share one notion of distance (insertions, deletions and
substitutions, one unit per code point):

* :func:`distance` computes the exact distance with a single DP row.
* :func:`distance_bounded` only answers up to a bound. It computes a narrow
  diagonal band of the matrix and gives up as soon as no alignment can stay
  within the bound, returning ``None``.

Both agree whenever the true distance is within the bound.
"""

from __future__ import annotations

from typing import List, Optional

from .exceptions import InvalidBoundError


def check_bound(max_distance) -> int:
    """Return *max_distance* if it is a non-negative ``int``, else raise."""
    if isinstance(max_distance, bool) or not isinstance(max_distance, int):
        raise InvalidBoundError(f"max_distance must be an int, got {type(max_distance).__name__}")
    if max_distance < 0:
        raise InvalidBoundError(f"max_distance must be >= 0, got {max_distance}")
    return max_distance


def distance(a: str, b: str) -> int:
    if len(a) > len(b):
        a, b = b, a
    if not a:
        return len(b)

    row = list(range(len(a) + 1))
    for i, cb in enumerate(b, start=1):
        diagonal = row[0]
        row[0] = i
        for j, ca in enumerate(a, start=1):
            above = row[j]
            if ca == cb:
                row[j] = diagonal
            else:
                row[j] = 1 + min(above, row[j - 1], diagonal)
            diagonal = above
    return row[-1]


def distance_bounded(a: str, b: str, max_distance: int) -> Optional[int]:
    """Return the distance between *a* and *b* if it is ``<= max_distance``.

    Returns ``None`` when the distance exceeds the bound. Work is limited to
    ``O(min(len(a), len(b)) * max_distance)``.

    The band covers the diagonal offsets ``j - i`` that a path of cost
    ``<= max_distance`` can visit: reaching offset ``o`` costs at least
    ``|o|`` and getting from there to the final cell (offset ``gap``) costs
    at least ``|gap - o|``. Everything outside is "unreachable"
    (``max_distance + 1``) and never wins a minimum.
    """
    check_bound(max_distance)
    if len(a) > len(b):
        a, b = b, a
    n, m = len(a), len(b)
    gap = m - n
    if gap > max_distance:
        return None
    if max_distance == 0:
        return 0 if a == b else None
    if n == 0:
        return m

    slack = (max_distance - gap) // 2
    lo = -slack
    width = gap + 2 * slack + 1
    unreachable = max_distance + 1

    # band[t] holds column j = i + lo + t of the current row; band[width] is a
    # permanent sentinel standing in for the cell above the band's right edge.
    band: List[int] = [unreachable] * (width + 1)
    for t in range(width):
        j = lo + t
        if 0 <= j <= m:
            band[t] = j

    for i in range(1, n + 1):
        ca = a[i - 1]
        left = unreachable
        row_min = unreachable
        for t in range(width):
            j = i + lo + t
            if j < 0 or j > m:
                value = unreachable
            elif j == 0:
                value = i
            else:
                diagonal = band[t]
                if ca == b[j - 1]:
                    value = diagonal
                else:
                    value = 1 + min(diagonal, band[t + 1], left)
            if value > unreachable:
                value = unreachable
            band[t] = value
            left = value
            if value < row_min:
                row_min = value
        if row_min > max_distance:
            return None

    result = band[gap - lo]
    return result if result <= max_distance else None
