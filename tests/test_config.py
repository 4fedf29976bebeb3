"""Tests for configuration resolution."""

import pytest
import requests

from npm_package_lint.config import Config, load_default_config, resolve_config
from npm_package_lint.errors import ConfigLoadError
from npm_package_lint.models import Severity
from npm_package_lint.parsers import config_file
from npm_package_lint.rules import RULES, get_rule

from conftest import FakeResponse


class TestDefaults:
    def test_none_uses_defaults(self):
        config = resolve_config()
        assert config.rules["description-required"] == "error"
        assert config.rules["name-required"] == "off"

    @pytest.mark.parametrize("empty", [{}, ""])
    def test_empty_value_is_same_as_absent(self, empty):
        assert resolve_config(empty) == resolve_config(None)

    def test_defaults_cover_every_registered_rule(self):
        assert set(resolve_config().rules) == set(RULES)

    def test_callers_cannot_mutate_stored_defaults(self):
        config = resolve_config()
        config.rules["description-required"] = "off"
        assert resolve_config().rules["description-required"] == "error"

    def test_default_config_is_read_only(self):
        with pytest.raises(TypeError):
            load_default_config()["rules"]["description-required"] = "off"

    def test_relative_path_resolves_against_package_dir(self):
        assert resolve_config("default_config.json") == resolve_config()


class TestPassedConfig:
    def test_user_config_replaces_defaults(self):
        config = resolve_config({"rules": {"name-required": "warning"}})
        assert config.rules == {"name-required": "warning"}

    def test_unmentioned_rule_falls_back_to_own_severity(self):
        config = resolve_config({"rules": {"name-required": "warning"}})
        setting = config.setting_for(get_rule("description-required"))
        assert setting.severity is Severity.ERROR
        assert setting.options is None

    def test_severity_override(self):
        config = resolve_config({"rules": {"name-required": "warning"}})
        assert config.setting_for(get_rule("name-required")).severity is Severity.WARNING

    def test_list_setting_carries_options(self):
        config = resolve_config(
            {"rules": {"prefer-absolute-version-dependencies": ["error", {"exceptions": ["a"]}]}}
        )
        setting = config.setting_for(get_rule("prefer-absolute-version-dependencies"))
        assert setting.severity is Severity.ERROR
        assert setting.options == {"exceptions": ["a"]}

    def test_mapping_setting_keeps_default_severity(self):
        config = resolve_config(
            {"rules": {"prefer-absolute-version-dependencies": {"exceptions": ["a"]}}}
        )
        rule = get_rule("prefer-absolute-version-dependencies")
        setting = config.setting_for(rule)
        assert setting.severity is rule.lint_type
        assert setting.options == {"exceptions": ["a"]}

    def test_off_setting(self):
        config = resolve_config({"rules": {"name-required": ["off"]}})
        assert not config.setting_for(get_rule("name-required")).enabled

    def test_resolving_is_idempotent(self):
        config = resolve_config({"rules": {"name-required": "warning"}})
        assert resolve_config(config) == config
        assert resolve_config(config.to_dict()) == config

    def test_empty_rules_map_survives_resolving_twice(self):
        config = resolve_config({"rules": {}})
        assert config.rules == {}
        assert resolve_config(config).rules == {}

    def test_empty_config_object_is_not_replaced_by_defaults(self):
        assert resolve_config(Config()) == Config(rules={})

    def test_config_object_is_validated(self):
        with pytest.raises(ConfigLoadError):
            resolve_config(Config(rules={"name-required": "loud"}))

    def test_resolved_config_is_a_copy(self):
        passed = {"rules": {"name-required": "warning"}}
        config = resolve_config(passed)
        config.rules["name-required"] = "off"
        assert passed["rules"]["name-required"] == "warning"

    @pytest.mark.parametrize(
        "value",
        [
            {"rules": {"name-required": "fatal"}},
            {"rules": {"name-required": ["error", {}, "extra"]}},
            {"rules": {}, "extends": "recommended"},
            {"name-required": "error"},
        ],
    )
    def test_invalid_config_rejected(self, value):
        with pytest.raises(ConfigLoadError):
            resolve_config(value)

    def test_unsupported_type_rejected(self):
        with pytest.raises(ConfigLoadError):
            resolve_config(42)


class TestConfigFiles:
    def test_absolute_path(self, write_json):
        path = write_json("lintrc.json", {"rules": {"version-format": "warning"}})
        assert resolve_config(str(path)).rules == {"version-format": "warning"}

    def test_path_object(self, write_json):
        path = write_json("lintrc.json", {"rules": {"version-format": "warning"}})
        assert resolve_config(path).rules == {"version-format": "warning"}

    def test_relative_path_uses_base_dir(self, tmp_path, write_json):
        write_json("configs/lintrc.json", {"rules": {"name-format": "off"}})
        config = resolve_config("configs/lintrc.json", base_dir=tmp_path)
        assert config.rules == {"name-format": "off"}

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "lintrc.yaml"
        path.write_text("rules:\n  name-required: warning\n", encoding="utf-8")
        assert resolve_config(str(path)).rules == {"name-required": "warning"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigLoadError):
            resolve_config(str(tmp_path / "missing.json"))

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "lintrc.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            resolve_config(str(path))

    def test_file_that_is_not_utf8(self, tmp_path):
        path = tmp_path / "lintrc.json"
        path.write_bytes(b'{"rules": {"name-required": "\xff"}}')
        with pytest.raises(ConfigLoadError):
            resolve_config(str(path))

    def test_url(self, monkeypatch):
        calls = []

        def fake_get(url):
            calls.append(url)
            return FakeResponse('{"rules": {"name-required": "error"}}')

        monkeypatch.setattr(config_file, "_http_get", fake_get)
        config = resolve_config("https://example.com/lintrc.json")
        assert config.rules == {"name-required": "error"}
        assert calls == ["https://example.com/lintrc.json"]

    def test_url_failure(self, monkeypatch):
        def fake_get(url):
            raise requests.ConnectionError("boom")

        monkeypatch.setattr(config_file, "_http_get", fake_get)
        with pytest.raises(ConfigLoadError):
            resolve_config("https://example.com/lintrc.json")
