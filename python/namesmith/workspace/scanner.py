"""
One-shot project scan for naming habits.

Reads JavaScript/TypeScript/Vue sources and counts:
- leading verbs of function names ("fetchUser" → fetch)
- words of variable names (nouns)
- hook (use*), store (*Store) and component (*Component/*View/*Container)
  declarations

Performance: uses os.walk() with directory pruning, so ignored trees such
as node_modules/ are never entered, and stops after max_files files.
"""

import logging
import os
import re
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Protocol

from namesmith.errors import ProjectScanFailure
from namesmith.ignore_patterns import is_file_too_large, is_source_file, load_all_ignores
from namesmith.naming.parsers import split_lower, strip_common_prefixes, strip_common_suffixes

logger = logging.getLogger("namesmith.workspace")

DEFAULT_MAX_SCAN_FILES = 2000
TOP_TERMS = 5

# function foo() / const foo = (...) => / const foo = function / const foo = async function
_FUNCTION_DECL = re.compile(
    r"(?:function\s+([A-Za-z_$][\w$]*)"
    r"|(?:const|let|var)\s+([A-Za-z_$][\w$]*)\s*=\s*(?:async\s*)?(?:function\b|\([^)]*\)\s*=>|[A-Za-z_$][\w$]*\s*=>))"
)
_VARIABLE_DECL = re.compile(
    r"(?:const|let|var)\s+([A-Za-z_$][\w$]*)(?![\w$])(?!\s*=\s*(?:async\s*)?(?:function\b|\(|class\b))"
)
_LEADING_VERB = re.compile(r"^([a-z]+)(?=[A-Z0-9]|$)")
_HOOK_NAME = re.compile(r"\buse[A-Z][A-Za-z0-9]*")
_STORE_NAME = re.compile(r"\b[A-Za-z][A-Za-z0-9]*Store\b")
_COMPONENT_NAME = re.compile(r"\b[A-Z][A-Za-z0-9]*?(Component|View|Container)\b")


@dataclass(frozen=True)
class ProjectConventionSnapshot:
    """Naming habits of one project, computed once."""

    files_scanned: int = 0
    top_verbs: tuple[str, ...] = ()
    top_nouns: tuple[str, ...] = ()
    hook_prefix: bool = False
    store_pattern: bool = False
    component_suffixes: tuple[str, ...] = ()


class FileSource(Protocol):
    """Directory-reading capability used by the scan."""

    def list_files(self, root: Path) -> Iterator[Path]:
        ...

    def read_file(self, path: Path) -> str:
        ...


def _pruned_walk(root: Path, ignore_spec) -> Iterator[Path]:
    """
    Walk root, pruning ignored directories IN-PLACE before descending.

    Yields:
        Absolute path of each non-ignored file
    """
    root_str = str(root)

    for current, dirs, files in os.walk(root):
        rel_root = "" if current == root_str else os.path.relpath(current, root).replace("\\", "/")

        # Trailing slash so directory-only patterns ("build/") match
        dirs[:] = [
            d for d in dirs
            if not ignore_spec.match_file(f"{rel_root}/{d}/" if rel_root else f"{d}/")
        ]

        for f in files:
            rel_str = f"{rel_root}/{f}" if rel_root else f
            if not ignore_spec.match_file(rel_str):
                yield Path(current) / f


class LocalFileSource:
    """
    FileSource over the local filesystem.

    Honors DEFAULT_IGNORES, .gitignore and .namesmithignore; yields only
    source files within their size limit, skipping symlinks.
    """

    def list_files(self, root: Path) -> Iterator[Path]:
        root = Path(root)
        if not root.is_dir():
            raise ProjectScanFailure(f"Project root is not a directory: {root}")
        try:
            with os.scandir(root) as entries:
                next(entries, None)
        except OSError as e:
            raise ProjectScanFailure(f"Project root is not readable: {root}: {e}") from e

        ignore_spec = load_all_ignores(root)
        for path in _pruned_walk(root, ignore_spec):
            if path.is_symlink() or not is_source_file(path):
                continue
            if is_file_too_large(path):
                logger.debug(f"Skipping oversized file: {path}")
                continue
            yield path

    def read_file(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8", errors="replace")


def _leading_verb(name: str) -> Optional[str]:
    match = _LEADING_VERB.match(name)
    return match.group(1) if match else None


def _collect(code: str, verbs: Counter, nouns: Counter, habits: Counter):
    for match in _FUNCTION_DECL.finditer(code):
        name = match.group(1) or match.group(2)
        if name and not name.startswith("_") and len(name) > 1:
            verb = _leading_verb(name)
            if verb:
                verbs[verb] += 1

    for match in _VARIABLE_DECL.finditer(code):
        name = match.group(1)
        if name and not name.startswith("_") and len(name) > 1:
            # useUserStore → User
            core = strip_common_suffixes(strip_common_prefixes(name)[-1])[-1]
            nouns.update(split_lower(core))

    habits["hook"] += len(_HOOK_NAME.findall(code))
    habits["store"] += len(_STORE_NAME.findall(code))
    for suffix in _COMPONENT_NAME.findall(code):
        habits[suffix.lower()] += 1


def scan_project(
    root: Path,
    source: Optional[FileSource] = None,
    max_files: int = DEFAULT_MAX_SCAN_FILES,
) -> ProjectConventionSnapshot:
    """
    Scan a project once and summarize its naming habits.

    Args:
        root: Project root directory
        source: FileSource to read through (default: LocalFileSource)
        max_files: Stop after reading this many files

    Returns:
        ProjectConventionSnapshot (empty counts when no source file exists)

    Raises:
        ProjectScanFailure: root missing, not a directory, or unreadable.
            Unreadable individual files are logged and skipped.
    """
    source = source if source is not None else LocalFileSource()
    root = Path(root)

    verbs: Counter = Counter()
    nouns: Counter = Counter()
    habits: Counter = Counter()
    files_scanned = 0

    for path in source.list_files(root):
        if files_scanned >= max_files:
            logger.info(f"Scan stopped at {max_files} files")
            break
        try:
            code = source.read_file(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
            continue
        files_scanned += 1
        _collect(code, verbs, nouns, habits)

    component_suffixes = tuple(
        suffix for suffix, count in sorted(
            ((s, habits[s]) for s in ("view", "container", "component")),
            key=lambda item: -item[1],
        )
        if count > 0
    )

    snapshot = ProjectConventionSnapshot(
        files_scanned=files_scanned,
        top_verbs=tuple(v for v, _ in verbs.most_common(TOP_TERMS)),
        top_nouns=tuple(n for n, _ in nouns.most_common(TOP_TERMS)),
        hook_prefix=habits["hook"] > 0 or "use" in verbs,
        store_pattern=habits["store"] > 0,
        component_suffixes=component_suffixes,
    )
    logger.info(
        f"Scanned {files_scanned} files in {root}: verbs={list(snapshot.top_verbs)}, "
        f"hooks={snapshot.hook_prefix}, stores={snapshot.store_pattern}"
    )
    return snapshot
