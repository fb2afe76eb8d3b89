"""
Engine configuration.

Environment Variables:
- NAMESMITH_COUNT: Number of names returned per request (default: 5)
- NAMESMITH_TOP_K: Verbs/nouns/adjectives kept per category, clamped to 3..5 (default: 4)
- NAMESMITH_MAX_CANDIDATES: Hard cap on raw candidates before dedupe (default: 200)
- NAMESMITH_PROJECT_ROOT: Source tree to scan for naming habits (default: unset, no scan)
- NAMESMITH_SCAN_TIMEOUT: Seconds a request waits for the one-time scan (default: 2.0)
- NAMESMITH_MAX_SCAN_FILES: Files read by the scan at most (default: 2000)
- NAMESMITH_SAMPLE_SEED: Integer seed; when set, names are sampled instead of taken in order
- NAMESMITH_ROMANIZE: "0"/"false" disables pinyin romanization of unmapped Chinese
- NAMESMITH_LOG_DIR: Directory for daily log files (default: unset, no file logging)
- NAMESMITH_LOG_LEVEL: Level of the "namesmith" logger, e.g. DEBUG (default: unset)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from namesmith.logging_config import parse_level

logger = logging.getLogger("namesmith.config")

MIN_TOP_K = 3
MAX_TOP_K = 5


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring malformed {name}={raw!r}, using {default}")
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring malformed {name}={raw!r}, using {default}")
        return default


def _env_level(name: str) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        parse_level(raw)
    except ValueError:
        logger.warning(f"Ignoring unknown {name}={raw!r}")
        return None
    return raw.strip().upper()


@dataclass(frozen=True)
class EngineConfig:
    """Read-only settings handed to NamingEngine at construction."""

    count: int = 5
    top_k: int = 4
    max_candidates: int = 200
    project_root: Optional[Path] = None
    scan_timeout: float = 2.0
    max_scan_files: int = 2000
    sample_seed: Optional[int] = None
    romanize_unmapped: bool = True
    log_dir: Optional[Path] = None
    log_level: Optional[str] = None

    def __post_init__(self):
        if self.count < 1:
            raise ValueError("count must be at least 1")
        if self.max_candidates < 1:
            raise ValueError("max_candidates must be at least 1")
        # Clamp rather than reject: top_k is a tuning knob
        object.__setattr__(self, "top_k", max(MIN_TOP_K, min(MAX_TOP_K, self.top_k)))
        if self.project_root is not None and not isinstance(self.project_root, Path):
            object.__setattr__(self, "project_root", Path(self.project_root))
        if self.log_dir is not None and not isinstance(self.log_dir, Path):
            object.__setattr__(self, "log_dir", Path(self.log_dir))

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Build a config from NAMESMITH_* environment variables."""
        defaults = cls()

        count = _env_int("NAMESMITH_COUNT", defaults.count)
        if count is None or count < 1:
            logger.warning(f"NAMESMITH_COUNT must be positive, using {defaults.count}")
            count = defaults.count

        max_candidates = _env_int("NAMESMITH_MAX_CANDIDATES", defaults.max_candidates)
        if max_candidates is None or max_candidates < 1:
            max_candidates = defaults.max_candidates

        root = os.getenv("NAMESMITH_PROJECT_ROOT")
        log_dir = os.getenv("NAMESMITH_LOG_DIR")
        romanize = os.getenv("NAMESMITH_ROMANIZE", "1").lower() not in ("0", "false", "no", "off")

        return cls(
            count=count,
            top_k=_env_int("NAMESMITH_TOP_K", defaults.top_k),
            max_candidates=max_candidates,
            project_root=Path(root) if root else None,
            scan_timeout=_env_float("NAMESMITH_SCAN_TIMEOUT", defaults.scan_timeout),
            max_scan_files=_env_int("NAMESMITH_MAX_SCAN_FILES", defaults.max_scan_files),
            sample_seed=_env_int("NAMESMITH_SAMPLE_SEED", None),
            romanize_unmapped=romanize,
            log_dir=Path(log_dir) if log_dir else None,
            log_level=_env_level("NAMESMITH_LOG_LEVEL"),
        )
