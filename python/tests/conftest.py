"""
Pytest configuration and fixtures for namesmith tests.
"""

import logging

import pytest

from namesmith.config import EngineConfig
from namesmith.engine import LexiconTagger, LinguisticAnalyzer, NamingEngine, TermNormalizer


@pytest.fixture
def clean_logger():
    """Detach handlers added to the namesmith logger during a test."""
    logger = logging.getLogger("namesmith")
    before = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers[:]:
        if handler not in before:
            handler.close()
            logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def normalizer():
    """TermNormalizer with romanization enabled (the default)."""
    return TermNormalizer()


@pytest.fixture
def analyzer():
    """LinguisticAnalyzer over the offline lexicon tagger."""
    return LinguisticAnalyzer(LexiconTagger())


@pytest.fixture
def analyze(normalizer, analyzer):
    """Normalize + analyze a description in one call."""
    def _analyze(description: str):
        return analyzer.analyze(normalizer.normalize(description), description=description)
    return _analyze


@pytest.fixture
def engine():
    """NamingEngine with default settings and no project scan."""
    return NamingEngine(EngineConfig())


@pytest.fixture
def js_project(tmp_path):
    """
    Small front-end project with one scannable source file.

    Also contains files the scan must skip: dependencies, build output,
    hidden directories, non-source files.
    """
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "user.js").write_text(
        "export function fetchUser(id) { return api.get(id) }\n"
        "export const fetchOrders = async () => {}\n"
        "const userName = 'x'\n"
        "export const useUserStore = defineStore('user', {})\n"
        "export default function ProfileView() {}\n",
        encoding="utf-8",
    )

    (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
    (tmp_path / "node_modules" / "pkg" / "index.js").write_text("function getThing() {}\n")
    (tmp_path / "dist").mkdir()
    (tmp_path / "dist" / "bundle.js").write_text("function getThing() {}\n")
    (tmp_path / ".cache").mkdir()
    (tmp_path / ".cache" / "tmp.js").write_text("function getThing() {}\n")
    (tmp_path / "README.md").write_text("# project\n")

    return tmp_path
