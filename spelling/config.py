from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Optional, Union

from .exceptions import ConfigError
from .logger import DEFAULT_LOG_LEVEL, VALID_LEVELS, get_logger

logger = get_logger(__name__)

DEFAULT_MAX_DISTANCE = 3
MAX_DISTANCE_LIMIT = 64

DEFAULT_CONFIG: Dict = {
    "max_distance": DEFAULT_MAX_DISTANCE,
    "log_level": DEFAULT_LOG_LEVEL,
    # Rotating log file path; null => no file logging
    "log_file": None,
    "parallel": {
        "enabled": False,
        "max_workers": 4,
        "chunk_size": 2048,
    },
}

CONFIG_ENV_VAR = "SPELLING_CONFIG"
CONFIG_PATH = Path.cwd() / "spelling.json"

PathLike = Union[str, Path]


def _config_path(path: Optional[PathLike]) -> Path:
    if path:
        return Path(path)
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env)
    return CONFIG_PATH


def _read_config_json(path: Path, strict: bool = False) -> Dict:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        return data if isinstance(data, dict) else {}
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        if strict:
            raise ConfigError(f"Cannot read config {path}: {e}") from e
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return {}


def _deep_copy_defaults() -> Dict:
    return json.loads(json.dumps(DEFAULT_CONFIG))


def _normalized_config(raw_cfg: Dict) -> Dict:
    raw = raw_cfg if isinstance(raw_cfg, dict) else {}
    merged = _deep_copy_defaults()
    merged.update(raw)
    merged["max_distance"] = normalize_max_distance(merged.get("max_distance"))
    merged["log_level"] = normalize_log_level(merged.get("log_level"))
    merged["log_file"] = normalize_log_file(merged.get("log_file"))
    merged["parallel"] = normalize_parallel(merged.get("parallel"))
    return merged


def _write_json(path: Path, payload: Dict):
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)


def get_config(path: Optional[PathLike] = None, strict: bool = False) -> Dict:
    """Load the JSON config at *path* merged over the defaults.

    Lookup order when *path* is not given: ``$SPELLING_CONFIG``, then
    ``spelling.json`` in the working directory. A missing file yields the
    defaults.
    """
    return _normalized_config(_read_config_json(_config_path(path), strict=strict))


def save_config(updates: Dict, path: Optional[PathLike] = None) -> Dict:
    target = _config_path(path)
    cfg = get_config(target)
    cfg.update(updates)
    cfg = _normalized_config(cfg)
    _write_json(target, cfg)
    logger.info("Saved config to %s", target)
    return cfg


def normalize_max_distance(raw) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return DEFAULT_MAX_DISTANCE
    return max(0, min(value, MAX_DISTANCE_LIMIT))


def normalize_log_level(raw) -> str:
    if isinstance(raw, str):
        level = raw.strip().upper()
        if level in VALID_LEVELS:
            return level
    return DEFAULT_LOG_LEVEL


def normalize_log_file(raw) -> Optional[str]:
    if isinstance(raw, (str, Path)) and str(raw).strip():
        return str(raw).strip()
    return None


def normalize_parallel(raw) -> Dict:
    """Keep only supported parallel keys, clamped to sane ranges."""
    default = DEFAULT_CONFIG.get("parallel", {})
    out = {
        "enabled": bool(default.get("enabled", False)),
        "max_workers": int(default.get("max_workers", 4)),
        "chunk_size": int(default.get("chunk_size", 2048)),
    }
    if not isinstance(raw, dict):
        return out
    out["enabled"] = bool(raw.get("enabled", out["enabled"]))
    try:
        max_workers = int(raw.get("max_workers"))
    except (TypeError, ValueError):
        max_workers = out["max_workers"]
    out["max_workers"] = max(1, min(max_workers, 64))
    try:
        chunk_size = int(raw.get("chunk_size"))
    except (TypeError, ValueError):
        chunk_size = out["chunk_size"]
    out["chunk_size"] = max(1, min(chunk_size, 1_000_000))
    return out
