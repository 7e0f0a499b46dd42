"""Setting filters built from command-line options.

Each recognized option key contributes zero or more independent predicates
over a ``SettingDescriptor``. The predicates are combined with logical AND,
so the order in which options were given never matters.

Recognized keys:
    deprecated       Include deprecated settings (default true)
    deprecated-only  Include only deprecated settings
    internal         Include internal settings (default true)
    name             Single setting by exact name
    names            Comma-separated list of exact names
    prefix           Settings whose name starts with the value
    unsupported      Lift the default exclusion of internal settings

Any other key is ignored.
"""

from collections.abc import Callable, Iterable, Mapping

from .settings import SettingDescriptor

SettingFilter = Callable[[SettingDescriptor], bool]
Options = Mapping[str, str | None]


def all_of(predicates: Iterable[SettingFilter]) -> SettingFilter:
    """Combine predicates with logical AND. An empty set accepts everything."""
    predicates = list(predicates)

    def combined(setting: SettingDescriptor) -> bool:
        return all(predicate(setting) for predicate in predicates)

    return combined


def _is_enabled(value: str | None) -> bool:
    """A flag with no value, or the value 'true', keeps settings in."""
    return value is None or value.lower() == "true"


def _not_deprecated(setting: SettingDescriptor) -> bool:
    return not setting.deprecated


def _only_deprecated(setting: SettingDescriptor) -> bool:
    return setting.deprecated


def _not_internal(setting: SettingDescriptor) -> bool:
    return not setting.internal


def _option_filters(key: str, value: str | None) -> list[SettingFilter]:
    """Return the predicates contributed by a single option."""
    if key == "deprecated":
        return [] if _is_enabled(value) else [_not_deprecated]

    if key == "deprecated-only":
        return [_only_deprecated]

    if key == "internal":
        return [] if _is_enabled(value) else [_not_internal]

    if key == "name":
        return [lambda setting: setting.name == value]

    if key == "names":
        names = set((value or "").split(","))
        return [lambda setting: setting.name in names]

    if key == "prefix":
        prefix = value or ""
        return [lambda setting: setting.name.startswith(prefix)]

    return []


def build_filter(options: Options) -> SettingFilter:
    """Build the combined filter for a set of options.

    Args:
        options: Option map; a key mapped to None is a bare flag

    Returns:
        Predicate that accepts the settings to document. Internal settings
        are rejected unless the 'unsupported' key is present, whatever the
        'internal' option says.
    """
    predicates: list[SettingFilter] = []
    for key, value in options.items():
        predicates.extend(_option_filters(key, value))

    if "unsupported" not in options:
        predicates.append(_not_internal)

    return all_of(predicates)
