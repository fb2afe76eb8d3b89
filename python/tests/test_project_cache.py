"""
Tests for the one-shot project scan and its compute-once cache.
"""

import threading
from pathlib import Path

import pytest

from namesmith.errors import ProjectScanFailure
from namesmith.workspace import (
    LocalFileSource,
    ProjectConventionCache,
    ProjectConventionSnapshot,
    scan_project,
)


class TestScanProject:
    """Test scan_project() on a real directory."""

    def test_collects_habits(self, js_project):
        snapshot = scan_project(js_project)

        assert snapshot.files_scanned == 1
        assert snapshot.top_verbs[0] == "fetch"
        assert snapshot.top_nouns[0] == "user"
        assert snapshot.hook_prefix is True
        assert snapshot.store_pattern is True
        assert snapshot.component_suffixes == ("view",)

    def test_skips_ignored_and_non_source_files(self, js_project):
        files = {p.relative_to(js_project).as_posix() for p in LocalFileSource().list_files(js_project)}
        assert files == {"src/user.js"}

    def test_custom_ignore_file(self, js_project):
        (js_project / "legacy").mkdir()
        (js_project / "legacy" / "old.js").write_text("function getThing() {}\n")
        (js_project / ".namesmithignore").write_text("legacy/\n")

        assert scan_project(js_project).files_scanned == 1

    def test_gitignore(self, js_project):
        (js_project / "gen.ts").write_text("function getThing() {}\n")
        (js_project / ".gitignore").write_text("gen.ts\n")

        assert scan_project(js_project).files_scanned == 1

    def test_max_files(self, tmp_path):
        for i in range(5):
            (tmp_path / f"m{i}.ts").write_text("function loadItem() {}\n")

        assert scan_project(tmp_path, max_files=2).files_scanned == 2

    def test_empty_project(self, tmp_path):
        snapshot = scan_project(tmp_path)

        assert snapshot == ProjectConventionSnapshot()

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(ProjectScanFailure):
            scan_project(tmp_path / "missing")

    def test_file_as_root_raises(self, tmp_path):
        target = tmp_path / "a.js"
        target.write_text("")

        with pytest.raises(ProjectScanFailure):
            scan_project(target)

    def test_unreadable_file_is_skipped(self):
        class FlakySource:
            def list_files(self, root):
                return iter([Path("ok.ts"), Path("broken.ts")])

            def read_file(self, path):
                if path.name == "broken.ts":
                    raise OSError("permission denied")
                return "function saveDraft() {}\n"

        snapshot = scan_project(Path("."), source=FlakySource())

        assert snapshot.files_scanned == 1
        assert snapshot.top_verbs == ("save",)

    def test_component_suffix_ranking(self):
        class MemorySource:
            def list_files(self, root):
                return iter([Path("a.vue")])

            def read_file(self, path):
                return (
                    "const UserContainer = 1\nconst OrderContainer = 2\n"
                    "const CartView = 3\n"
                )

        snapshot = scan_project(Path("."), source=MemorySource())
        assert snapshot.component_suffixes == ("container", "view")


class TestProjectConventionCache:
    """Compute-once semantics."""

    def test_scans_once(self, js_project):
        calls = []

        def scanner(root, source, max_files):
            calls.append(root)
            return scan_project(root, source, max_files)

        cache = ProjectConventionCache(js_project, scanner=scanner, scan_timeout=10.0)
        first = cache.get()
        second = cache.get()

        assert first is second
        assert first.top_verbs[0] == "fetch"
        assert len(calls) == 1
        assert cache.done

    def test_concurrent_callers_bypass(self):
        release = threading.Event()
        calls = []

        def slow_scanner(root, source, max_files):
            calls.append(root)
            release.wait(5)
            return ProjectConventionSnapshot(files_scanned=1)

        cache = ProjectConventionCache(Path("."), scanner=slow_scanner, scan_timeout=0.05)

        # First caller times out, scan keeps running
        assert cache.get() is None
        # Scan still in flight: no wait, no second scan
        assert cache.get() is None
        assert len(calls) == 1

        release.set()
        assert cache._finished.wait(5)
        assert cache.get() == ProjectConventionSnapshot(files_scanned=1)
        assert len(calls) == 1

    def test_many_threads_one_scan(self):
        calls = []
        lock = threading.Lock()

        def scanner(root, source, max_files):
            with lock:
                calls.append(root)
            return ProjectConventionSnapshot(files_scanned=3)

        cache = ProjectConventionCache(Path("."), scanner=scanner, scan_timeout=5.0)
        threads = [threading.Thread(target=cache.get) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert cache.get() == ProjectConventionSnapshot(files_scanned=3)

    def test_failure_is_not_retried(self, tmp_path):
        calls = []

        def scanner(root, source, max_files):
            calls.append(root)
            return scan_project(root, source, max_files)

        cache = ProjectConventionCache(tmp_path / "missing", scanner=scanner)

        assert cache.get() is None
        assert cache.get() is None
        assert len(calls) == 1
        assert cache.done

    def test_unexpected_error_gives_none(self):
        def scanner(root, source, max_files):
            raise KeyError("bug")

        cache = ProjectConventionCache(Path("."), scanner=scanner, scan_timeout=5.0)
        assert cache.get() is None
        assert cache.done

    def test_passes_settings_to_scanner(self, tmp_path):
        seen = {}
        source = LocalFileSource()

        def scanner(root, src, max_files):
            seen.update(root=root, source=src, max_files=max_files)
            return ProjectConventionSnapshot()

        ProjectConventionCache(str(tmp_path), source=source, max_files=7, scanner=scanner).get()

        assert seen == {"root": tmp_path, "source": source, "max_files": 7}
