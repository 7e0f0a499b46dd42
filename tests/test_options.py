"""Tests for option resolution."""

from pathlib import Path

import pytest

from confdocs.options import (
    DEFAULT_ID,
    DEFAULT_ID_PREFIX,
    DEFAULT_TITLE,
    resolve_option,
    resolve_options,
)
from confdocs.settings import SettingDescriptor


@pytest.fixture
def warnings():
    """Collect advisories instead of printing them."""
    return []


class TestResolveOption:
    """Tests for resolve_option()."""

    def test_absent_uses_default_and_warns(self, warnings):
        """A missing key falls back to the default with one advisory."""
        value = resolve_option({}, "id", "ID", "--id=my-id", "fallback", warnings.append)
        assert value == "fallback"
        assert warnings == ["No ID provided (--id=my-id), using default: 'fallback'"]

    def test_present_is_verbatim(self, warnings):
        """A supplied value is used unchanged."""
        value = resolve_option({"id": " My Id "}, "id", "ID", "--id=my-id", "x", warnings.append)
        assert value == " My Id "
        assert warnings == []

    def test_empty_string_is_kept(self, warnings):
        """The empty string is a valid value."""
        value = resolve_option({"id": ""}, "id", "ID", "--id=my-id", "x", warnings.append)
        assert value == ""
        assert warnings == []


class TestResolveOptions:
    """Tests for resolve_options()."""

    def test_defaults(self, warnings):
        """An empty map resolves to the documented defaults."""
        resolved = resolve_options({}, warn=warnings.append)
        assert resolved.id == DEFAULT_ID == "settings-reference"
        assert resolved.title == DEFAULT_TITLE == "Settings reference"
        assert resolved.id_prefix == DEFAULT_ID_PREFIX == "config_"
        assert resolved.out_file is None

    def test_one_warning_per_missing_key(self, warnings):
        """Each missing display option produces one advisory."""
        resolve_options({}, warn=warnings.append)
        assert len(warnings) == 3
        assert "No ID provided" in warnings[0]
        assert "No title provided" in warnings[1]
        assert "No ID prefix provided" in warnings[2]

    def test_only_missing_keys_warn(self, warnings):
        """Supplied keys are not warned about."""
        resolve_options({"id": "a", "id-prefix": "b"}, warn=warnings.append)
        assert warnings == [
            "No title provided (--title=my-title), using default: 'Settings reference'"
        ]

    def test_supplied_values(self, warnings):
        """Supplied values override every default."""
        resolved = resolve_options(
            {"id": "", "title": "Reference", "id-prefix": "cfg-"},
            out_file=Path("out/settings.adoc"),
            warn=warnings.append,
        )
        assert resolved.id == ""
        assert resolved.title == "Reference"
        assert resolved.id_prefix == "cfg-"
        assert resolved.out_file == Path("out/settings.adoc")
        assert warnings == []

    def test_default_filter_excludes_internal(self, warnings):
        """The resolved filter rejects only internal settings by default."""
        resolved = resolve_options({}, warn=warnings.append)
        assert resolved.filter(SettingDescriptor(name="a", deprecated=True))
        assert not resolved.filter(SettingDescriptor(name="b", internal=True))

    def test_filter_uses_options(self, warnings):
        """The filter is built from the same option map."""
        resolved = resolve_options({"prefix": "dbms.", "unsupported": None}, warn=warnings.append)
        assert resolved.filter(SettingDescriptor(name="dbms.a", internal=True))
        assert not resolved.filter(SettingDescriptor(name="db.a"))
