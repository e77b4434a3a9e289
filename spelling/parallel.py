"""Data-parallel variant of the ranking aggregator.

The dictionary is cut into contiguous chunks. Each chunk is scored and
sorted by one worker, which returns its own list of ``(distance, index)``
pairs; nothing is shared between workers. After every chunk has finished,
the sorted runs are merged into the final order.

Threads are the default substrate. Any ``concurrent.futures.Executor`` can
be passed instead (a ``ProcessPoolExecutor`` works, since the worker is a
module-level function). Tie order between equal distances is not part of
the contract here.
"""

from __future__ import annotations

import heapq
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence, Tuple

from .distance import check_bound, distance_bounded
from .logger import get_logger
from .models import Suggestion
from .suggest import as_sequence

logger = get_logger(__name__)

DEFAULT_MAX_WORKERS = 4
DEFAULT_CHUNK_SIZE = 2048


def _rank_chunk(
    word: str, chunk: Sequence[str], start: int, max_distance: int
) -> List[Tuple[int, int]]:
    scored: List[Tuple[int, int]] = []
    for offset, candidate in enumerate(chunk):
        dist = distance_bounded(word, candidate, max_distance)
        if dist is not None:
            scored.append((dist, start + offset))
    scored.sort()
    return scored


def _chunk_bounds(total: int, chunk_size: int) -> List[Tuple[int, int]]:
    return [(start, min(start + chunk_size, total)) for start in range(0, total, chunk_size)]


def rank_parallel(
    dictionary: Iterable[str],
    word: str,
    max_distance: int,
    *,
    max_workers: Optional[int] = None,
    chunk_size: Optional[int] = None,
    executor: Optional[Executor] = None,
) -> List[Suggestion]:
    """Parallel counterpart of :func:`spelling.suggest.rank`.

    *executor*, when given, is used as-is and left running. Otherwise a
    thread pool of *max_workers* is created for this call only. Exceptions
    raised by a worker propagate to the caller.
    """
    check_bound(max_distance)
    candidates = as_sequence(dictionary)
    if not candidates:
        return []

    workers = max(1, max_workers or DEFAULT_MAX_WORKERS)
    size = max(1, chunk_size or DEFAULT_CHUNK_SIZE)
    bounds = _chunk_bounds(len(candidates), size)
    logger.debug(
        "rank_parallel %r: %d candidates in %d chunks (workers=%d)",
        word,
        len(candidates),
        len(bounds),
        workers,
    )

    if executor is not None:
        runs = _gather(executor, word, candidates, bounds, max_distance)
    else:
        with ThreadPoolExecutor(
            max_workers=min(workers, len(bounds)), thread_name_prefix="spelling-rank"
        ) as pool:
            runs = _gather(pool, word, candidates, bounds, max_distance)

    return [
        Suggestion(candidate=candidates[index], distance=dist, index=index)
        for dist, index in heapq.merge(*runs)
    ]


def _gather(
    executor: Executor,
    word: str,
    candidates: Sequence[str],
    bounds: List[Tuple[int, int]],
    max_distance: int,
) -> List[List[Tuple[int, int]]]:
    futures: List[Future] = [
        executor.submit(_rank_chunk, word, candidates[start:end], start, max_distance)
        for start, end in bounds
    ]
    try:
        return [future.result() for future in futures]
    except Exception:
        for pending in futures:
            pending.cancel()
        raise


def suggest_parallel(
    dictionary: Iterable[str],
    word: str,
    max_distance: int,
    *,
    max_workers: Optional[int] = None,
    chunk_size: Optional[int] = None,
    executor: Optional[Executor] = None,
) -> List[str]:
    return [
        s.candidate
        for s in rank_parallel(
            dictionary,
            word,
            max_distance,
            max_workers=max_workers,
            chunk_size=chunk_size,
            executor=executor,
        )
    ]
