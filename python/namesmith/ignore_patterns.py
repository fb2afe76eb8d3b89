"""
.gitignore pattern matching and file filtering for the project scan.

Uses pathspec library for GitIgnore-compliant pattern matching.
"""

import logging
from pathlib import Path

from pathspec import PathSpec

from namesmith.ignore_defaults import (
    DEFAULT_IGNORES,
    DEFAULT_MAX_FILE_SIZE,
    EXTENSION_SIZE_LIMITS,
    SOURCE_EXTENSIONS,
)

logger = logging.getLogger("namesmith.ignore_patterns")

CUSTOM_IGNORE_FILE = ".namesmithignore"


def _read_pattern_file(path: Path) -> list[str]:
    """Read non-empty, non-comment lines from an ignore file."""
    if not path.exists():
        return []

    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {path.name}: {e}")
        return []

    return [line for line in lines if line.strip() and not line.strip().startswith("#")]


def load_all_ignores(project_root: Path) -> PathSpec:
    """
    Load all ignore patterns: defaults + .gitignore + .namesmithignore.

    Args:
        project_root: Path to the scanned project

    Returns:
        PathSpec object combining all patterns
    """
    patterns = DEFAULT_IGNORES.copy()
    patterns.extend(_read_pattern_file(project_root / ".gitignore"))

    custom = _read_pattern_file(project_root / CUSTOM_IGNORE_FILE)
    if custom:
        logger.info(f"Loaded {len(custom)} custom patterns from {CUSTOM_IGNORE_FILE}")
    patterns.extend(custom)

    return PathSpec.from_lines("gitwildmatch", patterns)


def is_source_file(file_path: Path) -> bool:
    """True when the file has a recognized source extension."""
    return file_path.suffix.lower() in SOURCE_EXTENSIONS


def get_max_file_size(extension: str) -> int:
    """
    Get the maximum allowed file size for a given extension.

    Args:
        extension: File extension including dot (e.g., ".js", ".vue")

    Returns:
        Maximum file size in bytes (uses DEFAULT_MAX_FILE_SIZE if no override)
    """
    ext = extension.lower()
    if not ext.startswith("."):
        ext = f".{ext}"
    return EXTENSION_SIZE_LIMITS.get(ext, DEFAULT_MAX_FILE_SIZE)


def is_file_too_large(file_path: Path, max_size: int | None = None) -> bool:
    """
    Check if a file exceeds its size limit.

    Args:
        file_path: Path to the file to check
        max_size: Optional explicit size limit (overrides extension-based limit)

    Returns:
        True if file is too large, False otherwise
    """
    try:
        file_size = file_path.stat().st_size
    except OSError:
        # Can't stat file - let the reader fail on it instead
        return False

    limit = max_size if max_size is not None else get_max_file_size(file_path.suffix)
    return file_size > limit
