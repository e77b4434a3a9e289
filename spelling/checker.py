"""Config-driven entry point over a newline-delimited word list."""

from __future__ import annotations

from typing import Dict, List, Optional

from .config import get_config, normalize_max_distance, normalize_parallel
from .logger import apply_logging_config, get_logger
from .parallel import suggest_parallel
from .suggest import split_dictionary, suggest

logger = get_logger(__name__)


def spellcheck(
    dictionary_string: str,
    word: str,
    max_distance: Optional[int] = None,
    *,
    cfg: Optional[Dict] = None,
) -> List[str]:
    """Return the lines of *dictionary_string* within the bound of *word*.

    *max_distance* defaults to ``cfg["max_distance"]``. When
    ``cfg["parallel"]["enabled"]`` is set the parallel aggregator is used.
    """
    if cfg is None:
        cfg = get_config()
    apply_logging_config(cfg)

    if max_distance is None:
        max_distance = normalize_max_distance(cfg.get("max_distance"))
    dictionary = split_dictionary(dictionary_string)
    parallel = normalize_parallel(cfg.get("parallel"))
    if parallel.get("enabled"):
        logger.debug("spellcheck %r over %d words (parallel)", word, len(dictionary))
        return suggest_parallel(
            dictionary,
            word,
            max_distance,
            max_workers=parallel.get("max_workers"),
            chunk_size=parallel.get("chunk_size"),
        )
    logger.debug("spellcheck %r over %d words", word, len(dictionary))
    return suggest(dictionary, word, max_distance)
