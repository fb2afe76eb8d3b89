"""
Compute-once holder for the project convention snapshot.

The first get() starts the scan on a daemon thread and waits up to
scan_timeout seconds for it. Callers arriving while the scan runs do not
wait: they get None and proceed without project conventions. The result
(snapshot, or None on failure/timeout) is published exactly once and never
recomputed.
"""

import logging
import threading
from pathlib import Path
from typing import Callable, Optional

from namesmith.errors import Degradation, ProjectScanFailure

from .scanner import DEFAULT_MAX_SCAN_FILES, FileSource, ProjectConventionSnapshot, scan_project

logger = logging.getLogger("namesmith.workspace")

DEFAULT_SCAN_TIMEOUT = 2.0


class ProjectConventionCache:
    """
    Lazily scans one project root, at most once per instance.

    Args:
        root: Project root to scan
        source: FileSource passed through to the scanner
        scan_timeout: Seconds the first caller waits for the scan
        max_files: Maximum number of files the scan reads
        scanner: Scan function (root, source, max_files) -> snapshot
    """

    def __init__(
        self,
        root: Path,
        source: Optional[FileSource] = None,
        scan_timeout: float = DEFAULT_SCAN_TIMEOUT,
        max_files: int = DEFAULT_MAX_SCAN_FILES,
        scanner: Callable[..., ProjectConventionSnapshot] = scan_project,
    ):
        self.root = Path(root)
        self.source = source
        self.scan_timeout = scan_timeout
        self.max_files = max_files
        self._scanner = scanner

        self._lock = threading.Lock()
        self._finished = threading.Event()
        self._started = False
        self._snapshot: Optional[ProjectConventionSnapshot] = None

    @property
    def done(self) -> bool:
        """True once the scan has finished, successfully or not."""
        return self._finished.is_set()

    def get(self) -> Optional[ProjectConventionSnapshot]:
        """
        The snapshot if available, else None. Never raises.

        Only the caller that starts the scan waits (bounded by
        scan_timeout); a timed-out scan keeps running in the background and
        later callers see its result once it completes.
        """
        if self._finished.is_set():
            return self._snapshot

        with self._lock:
            if self._started:
                # Scan in flight: bypass
                return self._snapshot if self._finished.is_set() else None
            self._started = True

        worker = threading.Thread(target=self._run, name="namesmith-project-scan", daemon=True)
        worker.start()

        if not self._finished.wait(self.scan_timeout):
            logger.warning(
                f"{Degradation.PROJECT_SCAN_FAILURE.value}: scan of {self.root} "
                f"exceeded {self.scan_timeout}s, continuing without project conventions"
            )
            return None
        return self._snapshot

    def _run(self):
        snapshot = None
        try:
            snapshot = self._scanner(self.root, self.source, self.max_files)
        except ProjectScanFailure as e:
            logger.warning(f"{Degradation.PROJECT_SCAN_FAILURE.value}: {e}")
        except Exception as e:
            logger.error(f"{Degradation.PROJECT_SCAN_FAILURE.value}: unexpected error scanning {self.root}: {e}", exc_info=True)
        finally:
            with self._lock:
                self._snapshot = snapshot
            self._finished.set()
