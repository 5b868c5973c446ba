"""Main CLI entry point for cssconsts."""

import argparse
import sys
from typing import Optional

from .commands import run_resolver


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the cssconsts CLI."""
    parser = argparse.ArgumentParser(
        prog='cssconsts',
        description='Inline constant CSS custom properties'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    run_parser = subparsers.add_parser('run', help='Resolve constants in stylesheets')
    run_parser.add_argument(
        'stylesheets',
        nargs='+',
        help='Stylesheets to process'
    )
    run_parser.add_argument(
        '--file',
        type=str,
        help='Shared constants file, read once per run'
    )
    run_parser.add_argument(
        '--regex',
        type=str,
        metavar='PATTERN',
        help='Select constants by declaration name (default: names without lowercase letters)'
    )
    run_parser.add_argument(
        '--config',
        type=str,
        help='Path to YAML config with file/regex options'
    )
    run_parser.add_argument(
        '-o', '--output',
        type=str,
        help='Output file (single stylesheet only; default stdout)'
    )
    run_parser.add_argument(
        '--out-dir',
        type=str,
        help='Output directory (required for multiple stylesheets)'
    )
    run_parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    run_parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    run_parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'run':
        return run_resolver(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
