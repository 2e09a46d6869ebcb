"""Command-line interface for nulexgen."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from nulexgen.definition import LexerConfig
from nulexgen.errors import DefinitionError
from nulexgen.lexer import DEFAULT_CONFIG

DEFAULT_OUTPUT = Path("lexers/embedded/nu.xml")
CONFIG_FILENAME = "nulexgen.toml"

SUMMARY = (
    "Keywords and built-in commands",
    "Variables and assignments",
    "String interpolation",
    "Numbers, dates, durations, and filesizes",
    "Comments and operators",
    "Flags and punctuation",
)


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    output_file: Path | None  # None writes to stdout
    config: LexerConfig
    debug: bool
    summary: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="nulexgen",
        description="Generate the Nu syntax-highlighting lexer definition",
    )
    p.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help=f"Output file (default: {DEFAULT_OUTPUT})",
    )
    p.add_argument("--stdout", action="store_true", help="Write the definition to stdout")
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_FILENAME})",
    )
    p.add_argument("--name", help="Lexer display name")
    p.add_argument("--alias", help="Lexer alias")
    p.add_argument("--filename", metavar="GLOB", help="Filename glob")
    p.add_argument("--mime-type", help="MIME type")
    p.add_argument("--debug", action="store_true", help="Dump states to stderr")
    p.add_argument("--no-summary", action="store_true", help="Do not print the summary")
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_FILENAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace, cwd: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, cwd or Path("."))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError) as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    # Lexer metadata: defaults < config < CLI
    meta = {
        "name": DEFAULT_CONFIG.name,
        "alias": DEFAULT_CONFIG.alias,
        "filename": DEFAULT_CONFIG.filename,
        "mime_type": DEFAULT_CONFIG.mime_type,
    }
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict):
        for key in meta:
            value = cfg_lexer.get(key)
            if value is not None:
                if not isinstance(value, str):
                    raise argparse.ArgumentTypeError(f"[lexer] {key} must be a string")
                meta[key] = value
    for key in meta:
        value = getattr(args, key)
        if value is not None:
            meta[key] = value

    # Output path: default < config < CLI
    output_file: Path | None = DEFAULT_OUTPUT
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_path = cfg_output.get("path")
        if cfg_path is not None:
            if not isinstance(cfg_path, str):
                raise argparse.ArgumentTypeError("[output] path must be a string")
            output_file = Path(cfg_path)
    if args.output:
        output_file = Path(args.output)
    if args.stdout:
        output_file = None

    return CliOptions(
        output_file=output_file,
        config=LexerConfig(**meta),
        debug=args.debug,
        summary=not args.no_summary,
    )


def generate_file(options: CliOptions) -> str:
    """Build, validate, and render the lexer definition; return the XML text."""
    from nulexgen.debug import dump_states
    from nulexgen.lexer import build_lexer
    from nulexgen.render import render, write_definition

    definition = build_lexer(config=options.config)

    if options.debug:
        dump_states(definition)

    if options.output_file is not None:
        return write_definition(definition, options.output_file)
    return render(definition)


def print_summary(output_file: Path) -> None:
    """Report the written file and what the lexer covers on stderr."""
    print(f"Generated {output_file.name} lexer at: {output_file}", file=sys.stderr)
    print("\nThe lexer includes support for:", file=sys.stderr)
    for line in SUMMARY:
        print(f"- {line}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2/3). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        xml = generate_file(options)
    except DefinitionError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: cannot write {options.output_file}: {exc}", file=sys.stderr)
        return 3

    if options.output_file is None:
        sys.stdout.write(xml)
    elif options.summary:
        print_summary(options.output_file)

    return 0
