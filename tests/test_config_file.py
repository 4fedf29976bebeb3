"""Tests for the config-file parser and schema validation."""

import pytest

from npm_package_lint.errors import ConfigLoadError
from npm_package_lint.parsers import config_file
from npm_package_lint.validators import config_schema

from conftest import FakeResponse


class TestParse:
    def test_json(self, write_json):
        path = write_json("lintrc.json", {"rules": {"name-type": "error"}})
        assert config_file.parse(path) == {"rules": {"name-type": "error"}}

    def test_yml(self, tmp_path):
        path = tmp_path / "lintrc.yml"
        path.write_text("rules:\n  name-type: [warning]\n", encoding="utf-8")
        assert config_file.parse(path) == {"rules": {"name-type": ["warning"]}}

    def test_rc_file_without_extension_accepts_json(self, tmp_path):
        path = tmp_path / ".npmpackagejsonlintrc"
        path.write_text('{"rules": {"name-type": "off"}}', encoding="utf-8")
        assert config_file.parse(path) == {"rules": {"name-type": "off"}}

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "lintrc.yaml"
        path.write_text("rules: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="Invalid YAML"):
            config_file.parse(path)

    def test_non_object_document(self, tmp_path):
        path = tmp_path / "lintrc.yaml"
        path.write_text("- name-type\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="must be an object"):
            config_file.parse(path)

    def test_directory_is_not_a_config(self, tmp_path):
        with pytest.raises(ConfigLoadError, match="not found"):
            config_file.parse(tmp_path)


    def test_undecodable_bytes(self, tmp_path):
        path = tmp_path / "lintrc.yaml"
        path.write_bytes(b"rules:\n  name-required: \xff\n")
        with pytest.raises(ConfigLoadError, match="Failed to read"):
            config_file.parse(path)


class TestFetch:
    def test_ok(self, monkeypatch):
        monkeypatch.setattr(
            config_file, "_http_get", lambda url: FakeResponse('{"rules": {}}')
        )
        assert config_file.fetch("https://example.com/c.json") == {"rules": {}}

    def test_bad_status(self, monkeypatch):
        monkeypatch.setattr(config_file, "_http_get", lambda url: FakeResponse("", 404))
        with pytest.raises(ConfigLoadError, match="404"):
            config_file.fetch("https://example.com/c.json")

    def test_invalid_json(self, monkeypatch):
        monkeypatch.setattr(config_file, "_http_get", lambda url: FakeResponse("<html>"))
        with pytest.raises(ConfigLoadError, match="Invalid JSON"):
            config_file.fetch("https://example.com/c.json")


class TestSchema:
    def test_valid_document(self):
        config_schema.validate_config(
            {
                "rules": {
                    "name-required": "error",
                    "no-restricted-dependencies": ["error", ["gulp"]],
                    "prefer-absolute-version-dependencies": {"exceptions": ["a"]},
                }
            }
        )

    def test_error_lists_pointer(self):
        with pytest.raises(ConfigLoadError) as excinfo:
            config_schema.validate_config({"rules": {"name-required": "fatal"}})
        assert "- rules/name-required:" in str(excinfo.value)

    def test_root_errors_use_root_pointer(self):
        with pytest.raises(ConfigLoadError) as excinfo:
            config_schema.validate_config([])
        assert "- <root>:" in str(excinfo.value)

    def test_main_valid(self, write_json, capsys):
        path = write_json("lintrc.json", {"rules": {"name-required": "warning"}})
        assert config_schema.main(["--input", str(path)]) == 0
        assert "is valid" in capsys.readouterr().out

    def test_main_invalid(self, write_json, capsys):
        path = write_json("lintrc.json", {"rules": {"name-required": 3}})
        assert config_schema.main(["--input", str(path)]) == 1
        assert "ERROR" in capsys.readouterr().err

    def test_main_missing_file(self, tmp_path, capsys):
        assert config_schema.main(["--input", str(tmp_path / "nope.json")]) == 1
        assert "not found" in capsys.readouterr().err
