"""Setting descriptors and catalog loading for confdocs."""

from dataclasses import dataclass
from importlib.resources import files
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True)
class SettingDescriptor:
    """A single documented configuration setting."""

    name: str
    description: str | None = None
    default_value: str | None = None
    valid_values: str | None = None
    deprecated: bool = False
    internal: bool = False
    dynamic: bool = False
    replaced_by: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SettingDescriptor":
        """Create a SettingDescriptor from a catalog entry."""
        if not data.get("name"):
            raise ValueError(f"Setting entry has no name: {data!r}")
        return cls(
            name=str(data["name"]),
            description=_optional_str(data.get("description")),
            default_value=_optional_str(data.get("default")),
            valid_values=_optional_str(data.get("valid_values")),
            deprecated=_flag(data, "deprecated"),
            internal=_flag(data, "internal"),
            dynamic=_flag(data, "dynamic"),
            replaced_by=_optional_str(data.get("replaced_by")),
        )


def _flag(data: dict[str, Any], key: str) -> bool:
    """Read a boolean field, accepting quoted "true" and "false"."""
    value = data.get(key, False)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError(f"Setting '{data['name']}' has non-boolean {key}: {value!r}")


def _optional_str(value: Any) -> str | None:
    # YAML turns unquoted defaults like 7474 or true into non-strings
    if value is None:
        return None
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def get_bundled_catalog() -> str:
    """Return the content of the settings catalog shipped with the package."""
    return files("confdocs.data").joinpath("settings.yml").read_text(encoding="utf-8")


def load_settings(path: Path | None = None) -> list[SettingDescriptor]:
    """Load setting descriptors from a YAML catalog.

    Args:
        path: Catalog file. Uses the bundled catalog if not specified.

    Returns:
        Descriptors in catalog order.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the catalog is not valid YAML or an entry is malformed.
    """
    source = str(path) if path else "bundled catalog"
    try:
        if path is None:
            raw = yaml.safe_load(get_bundled_catalog())
        else:
            with open(path, encoding="utf-8") as f:
                raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in settings catalog {source}: {e}") from e

    raw = raw or {}
    entries = raw.get("settings", []) if isinstance(raw, dict) else None
    if not isinstance(entries, list):
        raise ValueError(f"Settings catalog {source} must contain a 'settings' list")

    settings = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError(f"Invalid setting entry in {source}: {entry!r}")
        settings.append(SettingDescriptor.from_dict(entry))
    return settings
