#!/usr/bin/env python3
"""
reminder2json - export Apple Reminders as JSON grouped by account and list.
"""

import argparse
import logging
import sys

from reminder_export.core import ExportConfig, ExportError, OutputFormat
from reminder_export.core.config import load_config, save_config, get_default_config_path
from reminder_export.commands import ExportCommand


def build_parser() -> argparse.ArgumentParser:
    default_config = get_default_config_path()

    parser = argparse.ArgumentParser(
        prog="reminder2json",
        description="Export Apple Reminders to JSON, grouped by account and list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  reminder2json                                  # All open reminders, full schema
  reminder2json --include-lists 'Work|Home'      # Only matching lists
  reminder2json --exclude-lists Shopping         # Everything but matching lists
  reminder2json --include-completed              # Include completed reminders
  reminder2json --output-format simple -o out.json
        """
    )

    parser.add_argument(
        '--config',
        help=f'Path to configuration file (default: {default_config})',
        default=None
    )
    parser.add_argument(
        '--include-lists',
        metavar='REGEX',
        default=None,
        help="Lists to include regex (default: '.*', all)"
    )
    parser.add_argument(
        '--exclude-lists',
        metavar='REGEX',
        default=None,
        help="Lists to exclude regex (default: '', none)"
    )
    parser.add_argument(
        '--include-completed', '--include-deleted',
        dest='include_completed',
        action='store_true',
        default=None,
        help='Include completed reminders'
    )
    parser.add_argument(
        '--output-format',
        choices=['full', 'simple', 'fullJson', 'remindmd'],
        default=None,
        help='Output schema (default: full)'
    )
    parser.add_argument(
        '--output', '-o',
        metavar='PATH',
        default=None,
        help='Write to PATH instead of stdout'
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=None,
        help='Seconds to wait for the Reminders store (default: 30)'
    )
    parser.add_argument(
        '--save-config',
        action='store_true',
        help='Persist the effective options to the configuration file'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output'
    )
    return parser


def apply_overrides(config: ExportConfig, args: argparse.Namespace) -> ExportConfig:
    """Return a config with command-line values layered over file values."""
    return ExportConfig(
        include_lists=config.include_lists if args.include_lists is None else args.include_lists,
        exclude_lists=config.exclude_lists if args.exclude_lists is None else args.exclude_lists,
        include_completed=config.include_completed if args.include_completed is None else True,
        output_format=(config.output_format if args.output_format is None
                       else OutputFormat.parse(args.output_format)),
        output_path=config.output_path if args.output is None else args.output,
        indent=config.indent,
        fetch_timeout=config.fetch_timeout if args.timeout is None else args.timeout,
    )


def main(argv=None):
    """Main entry point for reminder2json."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Logs go to stderr so stdout carries only JSON
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    try:
        config = apply_overrides(load_config(args.config), args)

        if args.verbose:
            actual_config_path = args.config if args.config else get_default_config_path()
            print(f"Using config: {actual_config_path}", file=sys.stderr)

        if args.save_config:
            saved_to = save_config(config, args.config)
            print(f"Saved config to {saved_to}", file=sys.stderr)

        cmd = ExportCommand(config, verbose=args.verbose)
        success = cmd.run()
        return 0 if success else 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130
    except ExportError as e:
        print(f"Error: {e}", file=sys.stderr)
        if not args.verbose:
            print("Re-run with --verbose for more detail.", file=sys.stderr)
        else:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
