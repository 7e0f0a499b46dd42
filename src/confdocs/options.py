"""Option resolution for confdocs."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .console import warning
from .filters import Options, SettingFilter, build_filter

# Default display settings
DEFAULT_ID = "settings-reference"
DEFAULT_TITLE = "Settings reference"
DEFAULT_ID_PREFIX = "config_"


@dataclass(frozen=True)
class ResolvedOptions:
    """Everything needed to render and write one document."""

    id: str
    title: str
    id_prefix: str
    filter: SettingFilter
    out_file: Path | None = None


def resolve_option(
    options: Options,
    key: str,
    label: str,
    example: str,
    default: str,
    warn: Callable[[str], None] = warning,
) -> str:
    """Return the value for ``key``, or ``default`` with an advisory if absent.

    A present key is used verbatim, including the empty string. A bare flag
    (key present without a value) also resolves to the empty string.
    """
    if key not in options:
        warn(f"No {label} provided ({example}), using default: '{default}'")
        return default
    return options[key] or ""


def resolve_options(
    options: Options,
    out_file: Path | None = None,
    warn: Callable[[str], None] = warning,
) -> ResolvedOptions:
    """Resolve display settings and the setting filter from an option map.

    Args:
        options: Option map; a key mapped to None is a bare flag
        out_file: Output path, or None for stdout
        warn: Sink for missing-option advisories

    Returns:
        ResolvedOptions for a single render
    """
    return ResolvedOptions(
        id=resolve_option(options, "id", "ID", "--id=my-id", DEFAULT_ID, warn),
        title=resolve_option(
            options, "title", "title", "--title=my-title", DEFAULT_TITLE, warn
        ),
        id_prefix=resolve_option(
            options,
            "id-prefix",
            "ID prefix",
            "--id-prefix=my-id-prefix",
            DEFAULT_ID_PREFIX,
            warn,
        ),
        filter=build_filter(options),
        out_file=out_file,
    )
