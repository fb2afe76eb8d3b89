"""
Default ignore patterns and source-file constants for the project scan.

This module contains the static configuration used by ignore_patterns.py.
"""

# ═══════════════════════════════════════════════════════════════════════════════
# Source Extensions
# ═══════════════════════════════════════════════════════════════════════════════
# Only these files are read when inferring a project's naming habits.
SOURCE_EXTENSIONS = frozenset({
    ".ts",
    ".tsx",
    ".js",
    ".jsx",
    ".mjs",
    ".vue",
    ".svelte",
})

# ═══════════════════════════════════════════════════════════════════════════════
# File Size Limits
# ═══════════════════════════════════════════════════════════════════════════════
# Files larger than these limits are skipped during the scan.

# Default max file size: 512KB
DEFAULT_MAX_FILE_SIZE = 524_288

# Per-extension size overrides (in bytes)
EXTENSION_SIZE_LIMITS: dict[str, int] = {
    ".js": 262_144,     # 256KB - Often bundled/minified
    ".mjs": 262_144,
    ".vue": 524_288,
    ".svelte": 524_288,
}

# Default ignore patterns (always applied)
DEFAULT_IGNORES = [
    # ═══════════════════════════════════════════
    # Hidden directories (VCS, IDE, caches)
    # ═══════════════════════════════════════════
    ".*/",
    # ═══════════════════════════════════════════
    # Build and Output Directories
    # ═══════════════════════════════════════════
    "bin/",
    "obj/",
    "build/",
    "dist/",
    "out/",
    "target/",
    "coverage/",
    # ═══════════════════════════════════════════
    # Package Managers and Dependencies
    # ═══════════════════════════════════════════
    "node_modules/",
    "bower_components/",
    "vendor/",
    "__pycache__/",
    # ═══════════════════════════════════════════
    # Generated files (no human naming habits)
    # ═══════════════════════════════════════════
    "*.min.js",
    "*.bundle.js",
    "*.chunk.js",
    "*.d.ts",
    "*.map",
]
