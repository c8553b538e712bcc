"""Command-line interface for colorfmt."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from colorfmt import __version__
from colorfmt.config.loader import load_config
from colorfmt.config.schema import Config
from colorfmt.core.color import parse_sample
from colorfmt.core.formatter import Formatter, render, resolve_formatter
from colorfmt.core.presets import PRESET_NAMES
from colorfmt.errors import ConfigError, FormatError, InvalidColorError

logger = logging.getLogger(__name__)


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="colorfmt",
        description="Render color samples with a preset or a custom template",
        epilog="Example: colorfmt -c 'Green: %{-4g}' '#00ff00'",
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--format",
        "-f",
        choices=PRESET_NAMES,
        metavar="NAME",
        help=f"Output format, one of {', '.join(PRESET_NAMES)} (defaults to hex)",
    )
    group.add_argument(
        "--custom",
        "-c",
        metavar="FORMAT",
        help="Custom output format",
    )
    group.add_argument(
        "--template",
        "-t",
        metavar="NAME",
        help="Named custom format from the configuration file",
    )

    parser.add_argument(
        "--config",
        type=Path,
        metavar="FILE",
        help="Configuration file path (default: ~/.config/colorfmt/config.yaml)",
    )

    parser.add_argument(
        "--edit",
        "-e",
        action="store_true",
        help="Edit the custom format interactively and print it (not with --format)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "colors",
        nargs="*",
        metavar="COLOR",
        help="Colors to render (#rrggbb, #aarrggbb, 0xAARRGGBB or r,g,b); read from stdin if omitted",
    )

    parsed = parser.parse_args(args)
    if parsed.edit and parsed.format is not None:
        parser.error("argument --edit/-e: not allowed with argument --format/-f")
    return parsed


def select_formatter(parsed: argparse.Namespace, config: Config) -> Formatter:
    """Pick the formatter from command-line options, falling back to the config."""
    if parsed.custom is not None or parsed.format is not None:
        return resolve_formatter(preset=parsed.format, custom=parsed.custom)
    return config.get_formatter(parsed.template)


def read_colors(parsed: argparse.Namespace) -> list[str]:
    """Colors from the command line, or one per non-empty stdin line."""
    if parsed.colors:
        return parsed.colors
    return [line.strip() for line in sys.stdin if line.strip()]


def run_editor(parsed: argparse.Namespace, config: Config) -> int:
    """Open the interactive editor and print the accepted template."""
    from colorfmt.editor.prompt import edit_template

    initial = parsed.custom
    if initial is None and parsed.template is not None:
        if parsed.template not in config.templates:
            raise ConfigError(f"unknown template: {parsed.template}")
        initial = config.templates[parsed.template]
    if initial is None:
        initial = config.custom or ""

    sample = parse_sample(parsed.colors[0]) if parsed.colors else None
    print(edit_template(initial, sample, config))
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    parsed = parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s - %(name)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(parsed.config)
    except ConfigError as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    try:
        if parsed.edit:
            return run_editor(parsed, config)

        formatter = select_formatter(parsed, config)
        logger.debug(f"Using formatter {formatter!r}")
        samples = [parse_sample(text) for text in read_colors(parsed)]
        for sample in samples:
            print(render(formatter, sample))
        return 0

    except FormatError as e:
        print(f"Error: {e}: {e.value}", file=sys.stderr)
        return 1
    except (ConfigError, InvalidColorError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
