"""Command-line interface for confdocs."""

import argparse
import sys
from pathlib import Path

from . import __version__
from .console import console, error, info
from .filters import Options
from .generator import AsciiDocGenerator, DocumentRenderer, MissingElementError
from .options import (
    DEFAULT_ID,
    DEFAULT_ID_PREFIX,
    DEFAULT_TITLE,
    ResolvedOptions,
    resolve_options,
)
from .output import write_document
from .settings import load_settings

# Parser destinations that are not part of the option map
NON_OPTION_DESTS = ("out_file", "catalog")

# Presence-only flags that also accept a --flag=value form
FLAG_OPTIONS = {"--deprecated-only": "deprecated-only", "--unsupported": "unsupported"}

USAGE_OPTIONS = [
    ("--id", "ID to use for settings summary", DEFAULT_ID),
    ("--id-prefix", "ID to prepend to generated ID for each setting details", DEFAULT_ID_PREFIX),
    ("--title", "Title to use for settings summary", DEFAULT_TITLE),
]

USAGE_FILTER_OPTIONS = [
    ("--deprecated", "Include deprecated settings", "true"),
    ("--deprecated-only", "Include only deprecated settings", "false"),
    ("--internal", "Include internal settings (see --unsupported)", "true"),
    ("--name=<name>", "Single setting by name", ""),
    ("--names=<name1>,<name2>", "Multiple settings by name", ""),
    ("--prefix=<prefix>", "All settings whose namespace match <prefix>", ""),
    ("--unsupported", "Include internal/unsupported settings", "false"),
]


def split_flag_values(args: list[str]) -> tuple[list[str], dict[str, str]]:
    """Pull ``--flag=value`` forms of presence-only flags out of ``args``.

    Returns the remaining arguments and the extracted values keyed by dest.
    """
    remaining: list[str] = []
    flag_values: dict[str, str] = {}
    for arg in args:
        option, sep, value = arg.partition("=")
        if sep and option in FLAG_OPTIONS:
            flag_values[FLAG_OPTIONS[option]] = value
        else:
            remaining.append(arg)
    return remaining, flag_values


def find_orphans(extras: list[str]) -> list[str]:
    """Return the bare arguments left over after option parsing.

    An unrecognized ``--option`` without ``=`` takes the bare word right after
    it as its value, so that word is dropped along with the option.
    """
    orphans = []
    skip_value = False
    for token in extras:
        if token.startswith("-") and token != "-":
            skip_value = "=" not in token
            continue
        if skip_value:
            skip_value = False
            continue
        orphans.append(token)
    return orphans


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Options that are not given are left out of the namespace entirely, so
    presence can be told apart from an empty value. Unrecognized options and
    their values are ignored. ``out_file`` is set only when exactly one bare
    argument remains.
    """
    if args is None:
        args = sys.argv[1:]
    args, flag_values = split_flag_values(args)

    parser = argparse.ArgumentParser(
        prog="confdocs",
        usage="%(prog)s [--options] [OUT_FILE]",
        description="Render configuration setting reference documentation as AsciiDoc.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        argument_default=argparse.SUPPRESS,
        allow_abbrev=False,
        epilog="""\
Examples:
  confdocs
  confdocs --id=dbms-settings --prefix=dbms. docs/dbms.adoc
  confdocs --deprecated-only --title="Deprecated settings"
  confdocs --names=dbms.mode,dbms.backup.enabled --unsupported

OUT_FILE is the output file; the document goes to stdout if it is omitted.
Presence-only flags also accept a value, e.g. --unsupported=true.
""",
    )

    # Display
    parser.add_argument("--id", metavar="ID", help="ID to use for settings summary")
    parser.add_argument(
        "--id-prefix",
        dest="id-prefix",
        metavar="PREFIX",
        help="ID to prepend to generated ID for each setting details",
    )
    parser.add_argument("--title", metavar="TITLE", help="Title to use for settings summary")

    # Filters
    parser.add_argument(
        "--deprecated",
        nargs="?",
        const=None,
        metavar="BOOL",
        help="Include deprecated settings (default: true)",
    )
    parser.add_argument(
        "--deprecated-only",
        dest="deprecated-only",
        action="store_const",
        const=None,
        help="Include only deprecated settings",
    )
    parser.add_argument(
        "--internal",
        nargs="?",
        const=None,
        metavar="BOOL",
        help="Include internal settings when combined with --unsupported (default: true)",
    )
    parser.add_argument("--name", metavar="NAME", help="Single setting by name")
    parser.add_argument("--names", metavar="NAMES", help="Comma-separated setting names")
    parser.add_argument("--prefix", metavar="PREFIX", help="Settings whose name starts with PREFIX")
    parser.add_argument(
        "--unsupported",
        action="store_const",
        const=None,
        help="Include internal/unsupported settings",
    )

    # Configuration
    parser.add_argument(
        "--catalog",
        metavar="FILE",
        default=None,
        help="Settings catalog YAML (default: bundled catalog)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parsed, extras = parser.parse_known_args(args)
    for dest, value in flag_values.items():
        setattr(parsed, dest, value)

    orphans = find_orphans(extras)
    parsed.out_file = orphans[0] if len(orphans) == 1 else None
    return parsed


def get_option_map(parsed_args: argparse.Namespace) -> dict[str, str | None]:
    """Return the supplied options, keyed by option name without dashes."""
    return {
        key: value
        for key, value in vars(parsed_args).items()
        if key not in NON_OPTION_DESTS
    }


def print_usage() -> None:
    """Print a short usage summary with defaults."""
    console.print("Usage: confdocs [--options] <out_file>", markup=False)
    console.print(
        "    No options are mandatory but in most cases user will want to set "
        "--id, --id-prefix and --title.",
        markup=False,
    )
    console.print("    If no <out_file> is given prints to stdout.", markup=False)
    for heading, rows in (("Options:", USAGE_OPTIONS), ("Filter options:", USAGE_FILTER_OPTIONS)):
        console.print(heading, markup=False)
        for flag, description, default in rows:
            console.print(f"    {flag:<30}{description} [{default}]", markup=False)


def generate(resolved: ResolvedOptions, renderer: DocumentRenderer) -> None:
    """Render the document and write it to the resolved target.

    Nothing is written unless rendering completes.
    """
    document = renderer.render(
        resolved.filter, resolved.id, resolved.title, resolved.id_prefix
    )

    if resolved.out_file is not None:
        info(f"Saving docs in '{resolved.out_file.absolute()}'.")
        write_document(resolved.out_file, document)
    else:
        sys.stdout.write(document)


def main(args: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments (for testing)

    Returns:
        Exit code (0 for success)

    Raises:
        MissingElementError: A setting required by the document is missing
        FileNotFoundError: The catalog or an output path component is missing
    """
    parsed_args = parse_args(args)
    print_usage()

    options: Options = get_option_map(parsed_args)
    out_file = Path(parsed_args.out_file) if parsed_args.out_file else None
    resolved = resolve_options(options, out_file)

    catalog = Path(parsed_args.catalog).expanduser() if parsed_args.catalog else None
    try:
        settings = load_settings(catalog)
        generate(resolved, AsciiDocGenerator(settings))
    except (MissingElementError, FileNotFoundError) as e:
        error(str(e))
        raise
    except ValueError as e:
        error(f"Error loading settings catalog: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
