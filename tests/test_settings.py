"""Tests for settings resolution."""

import pytest

from webhook_solver.config import DEFAULT_GENERATE_URL, DEFAULT_REG_NO, DEFAULT_TEST_URL
from webhook_solver.settings import (
    env,
    is_truthy,
    prop,
    resolve_config,
    resolve_final_query,
    Setting,
)


class TestIsTruthy:
    @pytest.mark.parametrize("value", ["1", "true", "yes", "TRUE", "  yes "])
    def test_truthy(self, value):
        assert is_truthy(value) is True

    @pytest.mark.parametrize("value", [None, "", "  ", "0", "false", "no", "on", "y", "truee"])
    def test_falsy(self, value):
        assert is_truthy(value) is False


class TestSetting:
    def test_first_non_blank_source_wins(self):
        setting = Setting((prop("a"), env("A")), "default")
        assert setting.resolve({"A": "from-env"}, {"a": "from-prop"}) == "from-prop"
        assert setting.resolve({"A": "from-env"}, {"a": "  "}) == "from-env"
        assert setting.resolve({}, {}) == "default"

    def test_no_default(self):
        assert Setting((env("MISSING"),)).resolve({}, {}) is None


class TestResolveConfig:
    def test_defaults(self):
        config = resolve_config(environ={}, properties={})
        assert config.generate_url == DEFAULT_GENERATE_URL
        assert config.test_url == DEFAULT_TEST_URL
        assert config.reg_no == DEFAULT_REG_NO
        assert config.dry_run is False
        assert config.download_pdf is False
        assert config.final_query is None

    def test_properties_override_environment(self):
        config = resolve_config(
            environ={"USER_REGNO": "ENV1", "GENERATE_URL": "https://env.example.com"},
            properties={"user.regno": "PROP1"},
        )
        assert config.reg_no == "PROP1"
        assert config.generate_url == "https://env.example.com"

    def test_flags(self):
        config = resolve_config(environ={"DRY_RUN": "yes"}, properties={"download.pdf": "1"})
        assert config.dry_run is True
        assert config.download_pdf is True

    def test_flag_property_precedes_environment(self):
        config = resolve_config(environ={"DRY_RUN": "true"}, properties={"DRY_RUN": "false"})
        assert config.dry_run is False

    def test_final_query_environment_precedes_property(self):
        config = resolve_config(
            environ={"FINAL_QUERY": "from-env"},
            properties={"final.query": "from-prop"},
        )
        assert config.final_query == "from-env"

    def test_final_query_property_fallback(self):
        config = resolve_config(environ={}, properties={"final.query": "from-prop"})
        assert config.final_query == "from-prop"

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv("FINAL_QUERY", "SELECT 1")
        monkeypatch.setenv("DRY_RUN", "TRUE")
        config = resolve_config()
        assert config.final_query == "SELECT 1"
        assert config.dry_run is True


class TestResolveFinalQuery:
    def test_environment_first(self):
        assert resolve_final_query({"FINAL_QUERY": "env"}, {"final.query": "prop"}) == "env"

    def test_property_fallback(self):
        assert resolve_final_query({"FINAL_QUERY": " "}, {"final.query": "prop"}) == "prop"

    def test_missing(self):
        assert resolve_final_query({}, {}) is None
