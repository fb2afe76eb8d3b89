"""
Project convention scan.

Optional: when a project root is configured, its sources are scanned once
for naming habits (common verbs, hook/store/component conventions) that bias
candidate generation.
"""

from .cache import ProjectConventionCache
from .scanner import FileSource, LocalFileSource, ProjectConventionSnapshot, scan_project

__all__ = [
    "FileSource",
    "LocalFileSource",
    "ProjectConventionCache",
    "ProjectConventionSnapshot",
    "scan_project",
]
