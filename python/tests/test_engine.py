"""
End-to-end tests for NamingEngine and generate_names().
"""

import logging
import re

import pytest

from namesmith.config import EngineConfig
from namesmith.engine import ConventionStore, EngineState, NamingEngine, facade, generate_names
from namesmith.naming import convert
from namesmith.types import CasingStyle, IdentifierKind
from namesmith.workspace import ProjectConventionCache, ProjectConventionSnapshot

# Plain style shapes for descriptions without digits
STRICT_PATTERNS = {
    CasingStyle.CAMEL: re.compile(r"^[a-z][a-zA-Z0-9]*$"),
    CasingStyle.PASCAL: re.compile(r"^[A-Z][a-zA-Z0-9]*$"),
    CasingStyle.SNAKE: re.compile(r"^[a-z][a-z0-9]*(?:_[a-z0-9]+)*$"),
    CasingStyle.KEBAB: re.compile(r"^[a-z][a-z0-9]*(?:-[a-z0-9]+)*$"),
    CasingStyle.CONSTANT: re.compile(r"^[A-Z][A-Z0-9]*(?:_[A-Z0-9]+)*$"),
    CasingStyle.FLAT: re.compile(r"^[a-z][a-z0-9]*$"),
}


class FakeCache:
    """Stands in for ProjectConventionCache."""

    def __init__(self, snapshot):
        self.snapshot = snapshot
        self.calls = 0

    def get(self):
        self.calls += 1
        return self.snapshot


class TestExamples:
    """Documented end-to-end examples."""

    def test_chinese_function(self, engine):
        names = engine.generate("获取用户信息", IdentifierKind.FUNCTION, CasingStyle.CAMEL)

        assert names == ["getUserInfo", "getUser", "getInfo", "getUsers", "fetchUserInfo"]
        assert engine.last_state is EngineState.DONE

    def test_english_component(self, engine):
        names = engine.generate("user profile", "component", "PascalCase")

        assert names == ["UserProfile", "UserProfileView", "UserProfileContainer", "UserProfileComponent", "User"]

    def test_constant(self, engine):
        names = engine.generate("max retry count", "constant", "CONSTANT_CASE")

        assert names[0] == "MAX_RETRY_COUNT"
        assert "MAX_RETRY_COUNT_LIMIT" in names

    def test_chinese_constant(self, engine):
        assert engine.generate("最大重试次数", "constant", "CONSTANT_CASE")[0] == "MAX_RETRY_COUNT"

    def test_digit_leading_is_guarded(self, engine):
        assert engine.generate("3d model", "variable", "camelCase")[0] == "_3dModel"

    @pytest.mark.parametrize("style", list(CasingStyle))
    def test_digit_inside_word_is_stable(self, engine, style):
        names = engine.generate("i18n config", "constant", style)

        assert convert("i18n config", style) in names
        assert [convert(name, style) for name in names] == names


class TestOutputContract:
    """Exactly count distinct names, each valid in the requested style."""

    @pytest.mark.parametrize("style", list(CasingStyle))
    @pytest.mark.parametrize("kind", list(IdentifierKind))
    def test_every_kind_and_style(self, engine, kind, style):
        names = engine.generate("获取用户信息", kind, style)

        assert len(names) == 5
        assert len(set(names)) == 5
        for name in names:
            assert STRICT_PATTERNS[style].match(name), name

    @pytest.mark.parametrize("style", list(CasingStyle))
    @pytest.mark.parametrize("kind", list(IdentifierKind))
    def test_empty_description(self, engine, kind, style):
        names = engine.generate("", kind, style)

        assert len(names) == 5
        assert len(set(names)) == 5
        for name in names:
            assert STRICT_PATTERNS[style].match(name), name

    def test_custom_count(self):
        engine = NamingEngine(EngineConfig(count=3))
        assert len(engine.generate("get user info", "function")) == 3

    def test_large_count_is_padded(self):
        engine = NamingEngine(EngineConfig(count=12))
        names = engine.generate("refresh", "function")

        assert len(names) == 12
        assert len(set(names)) == 12

    def test_deterministic(self, engine):
        assert engine.generate("用户列表", "variable") == engine.generate("用户列表", "variable")

    def test_seeded_sampling_is_reproducible(self):
        first = NamingEngine(EngineConfig(sample_seed=11)).generate("get user info", "util")
        second = NamingEngine(EngineConfig(sample_seed=11)).generate("get user info", "util")

        assert first == second


class TestDegradation:
    """generate() never raises."""

    def test_empty_description_uses_kind_fallbacks(self, engine):
        names = engine.generate("", IdentifierKind.FUNCTION, CasingStyle.CAMEL)

        assert names == ["handleAction", "processData", "executeTask", "defaultName", "fallbackName"]
        assert engine.last_state is EngineState.DONE

    @pytest.mark.parametrize("description", [None, 42, ["get", "user"]])
    def test_non_string_description(self, engine, description):
        names = engine.generate(description, "function")

        assert names[0] == "handleAction"
        assert len(names) == 5

    def test_unknown_kind_and_style_are_coerced(self, engine):
        names = engine.generate("user list", "widget", "ALLCAPS")

        assert names == engine.generate("user list", IdentifierKind.VARIABLE, CasingStyle.CAMEL)

    def test_long_description_is_truncated(self):
        seen = []

        class RecordingNormalizer:
            def normalize(self, text):
                seen.append(text)
                return text.split()

        engine = NamingEngine(normalizer=RecordingNormalizer())
        engine.generate("user " * 200)

        assert len(seen[0]) == 500

    def test_stage_failure_returns_generic_fallbacks(self):
        class BrokenNormalizer:
            def normalize(self, text):
                raise RuntimeError("dictionary corrupted")

        engine = NamingEngine(normalizer=BrokenNormalizer())
        names = engine.generate("获取用户信息", "function", "camelCase")

        assert names == ["defaultName", "fallbackName", "backupName", "alternativeName", "reserveName"]
        assert engine.last_state is EngineState.ERROR_FALLBACK

    def test_error_fallback_honors_style_and_count(self):
        class BrokenNormalizer:
            def normalize(self, text):
                raise RuntimeError("boom")

        engine = NamingEngine(EngineConfig(count=7), normalizer=BrokenNormalizer())
        names = engine.generate("x", "function", "snake_case")

        assert names == [
            "default_name", "fallback_name", "backup_name", "alternative_name", "reserve_name",
            "default_name_1", "default_name_2",
        ]

    def test_error_fallback_uses_configured_generic_names(self):
        class BrokenNormalizer:
            def normalize(self, text):
                raise RuntimeError("boom")

        conventions = ConventionStore(generic_fallbacks=("spare name", "extra name"))
        engine = NamingEngine(EngineConfig(count=4), normalizer=BrokenNormalizer(), conventions=conventions)

        assert engine.generate("x", "function") == ["spareName", "extraName", "spareName1", "spareName2"]
        assert engine.generate("x", "function") == engine.sampler.pad([], 4, None, CasingStyle.CAMEL)


class TestProjectConventions:
    """Snapshot from the project scan feeds the generator."""

    def test_snapshot_verbs_used(self):
        cache = FakeCache(ProjectConventionSnapshot(top_verbs=("handle", "use")))
        engine = NamingEngine(project_cache=cache)

        assert engine.generate("user info", "function")[0] == "handleUserInfo"
        assert cache.calls == 1

    def test_snapshot_nouns_complete_bare_action(self):
        engine = NamingEngine(project_cache=FakeCache(ProjectConventionSnapshot(top_nouns=("order", "cart"))))

        assert engine.generate("get", "function")[:2] == ["getOrder", "getCart"]

    def test_no_snapshot(self):
        engine = NamingEngine(project_cache=FakeCache(None))
        assert engine.generate("user info", "function")[0] == "handleUser"

    def test_project_root_builds_cache(self, js_project):
        engine = NamingEngine(EngineConfig(project_root=js_project, scan_timeout=10.0))

        assert isinstance(engine.project_cache, ProjectConventionCache)
        assert engine.generate("user info", "function")[0] == "fetchUserInfo"

    def test_no_project_root_no_cache(self, engine):
        assert engine.project_cache is None


class TestGenerateNames:
    """Module-level convenience function."""

    @pytest.fixture(autouse=True)
    def fresh_default_engine(self, monkeypatch):
        for name in (
            "NAMESMITH_COUNT", "NAMESMITH_PROJECT_ROOT", "NAMESMITH_SAMPLE_SEED",
            "NAMESMITH_LOG_DIR", "NAMESMITH_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setattr(facade, "_default_engine", None)

    def test_defaults(self):
        names = generate_names("user list")

        assert len(names) == 5
        assert names[0] == "userList"

    def test_env_count(self, monkeypatch):
        monkeypatch.setenv("NAMESMITH_COUNT", "2")
        assert len(generate_names("get user info", "function")) == 2

    def test_engine_is_reused(self):
        assert facade.get_default_engine() is facade.get_default_engine()

    def test_env_log_dir_enables_file_logging(self, monkeypatch, tmp_path, clean_logger):
        monkeypatch.setenv("NAMESMITH_LOG_DIR", str(tmp_path))
        monkeypatch.setenv("NAMESMITH_LOG_LEVEL", "DEBUG")

        generate_names("user list")

        assert clean_logger.level == logging.DEBUG
        log_file = next(tmp_path.glob("namesmith-*.log"))
        assert "Logging to" in log_file.read_text(encoding="utf-8")
