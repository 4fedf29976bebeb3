"""Tests for the presence, type and format validators."""

from npm_package_lint.validators import formats, presence, types


class TestPresence:
    def test_existing_node(self):
        assert presence.exists({"description": "x"}, "description")

    def test_null_value_still_exists(self):
        assert presence.exists({"description": None}, "description")

    def test_missing_node(self):
        assert not presence.exists({}, "description")


class TestTypes:
    def test_missing_node_passes_every_check(self):
        for check in types.SHAPE_CHECKS.values():
            assert check({}, "repository")

    def test_is_string(self):
        assert types.is_string({"name": "pkg"}, "name")
        assert not types.is_string({"name": ["pkg"]}, "name")

    def test_is_object(self):
        assert types.is_object({"repository": {"type": "git"}}, "repository")
        assert not types.is_object({"repository": ["git"]}, "repository")

    def test_is_array(self):
        assert types.is_array({"files": ["index.js"]}, "files")
        assert not types.is_array({"files": "index.js"}, "files")

    def test_is_boolean(self):
        assert types.is_boolean({"private": True}, "private")
        assert not types.is_boolean({"private": "true"}, "private")


class TestFormats:
    def test_lowercase_string(self):
        assert formats.is_lowercase("awesome-module")

    def test_mixed_case_string(self):
        assert not formats.is_lowercase("aweSome-moDule")

    def test_version_missing_node(self):
        assert formats.is_valid_version_number({"version": "1.0.0"}, "devDependencies")

    def test_version_valid(self):
        assert formats.is_valid_version_number({"version": "1.0.0"}, "version")

    def test_version_with_letter_in_major(self):
        assert not formats.is_valid_version_number({"version": "1a.0"}, "version")

    def test_version_with_letter_in_minor(self):
        assert not formats.is_valid_version_number({"version": "1.a.0"}, "version")
