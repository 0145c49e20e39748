"""
Command-line interface for docfix

Fixes Javadoc comments in Java source files so they follow the Oracle
Javadoc guidelines, runs the build plugin task, and manages configuration.
"""

import argparse
import logging
import sys
from typing import List, Optional

from docfix import __version__
from docfix.cli.commands import cmd_check, cmd_config, cmd_fix, cmd_info, cmd_task
from docfix.cli.rich_output import set_rich_enabled
from docfix.config import ConfigurationError, load_config


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _add_fix_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="Java source file or directory")
    parser.add_argument(
        "--encoding",
        "-encoding",
        dest="encoding",
        metavar="CHARSET",
        help="Character encoding of the sources (default: detect per file)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        help="Maximum directory depth to descend (default: 63)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="docfix",
        description="docfix - Fix Javadoc comments to conform to Oracle Javadoc guidelines",
        epilog='Use "docfix <command> --help" for detailed command help.',
    )

    # Global options
    parser.add_argument("--config", "-c", type=str, help="Path to configuration file")

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output and debug logging",
    )

    parser.add_argument(
        "--no-rich",
        action="store_true",
        help="Disable rich terminal output (use plain text)",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Fix command
    fix_parser = subparsers.add_parser("fix", help="Fix Javadoc comments in a file or directory")
    _add_fix_arguments(fix_parser)
    fix_parser.add_argument(
        "--dryrun",
        "--dry-run",
        dest="dryrun",
        action="store_true",
        help="Show what would change without modifying any file",
    )

    # Check command
    check_parser = subparsers.add_parser(
        "check", help="Report files whose Javadoc comments need fixing; exit 1 if any"
    )
    _add_fix_arguments(check_parser)

    # Task command
    task_parser = subparsers.add_parser(
        "task", help="Apply the build plugin to a project and run its docfix task"
    )
    task_parser.add_argument(
        "project_dir", nargs="?", default=".", help="Project directory (default: current)"
    )
    task_parser.add_argument(
        "--source-dir",
        action="append",
        metavar="DIR",
        help="Java source directory, relative to the project; may be repeated",
    )
    task_parser.add_argument("--encoding", metavar="CHARSET", help="Character encoding (default: UTF-8)")
    task_parser.add_argument(
        "--dryrun", "--dry-run", dest="dryrun", action="store_true", help="Do not modify files"
    )

    # Info command
    info_parser = subparsers.add_parser("info", help="Show the plugin publishing descriptor")
    info_parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")

    # Config command
    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="config_action", help="Config actions")

    show_parser = config_subparsers.add_parser("show", help="Show current configuration")
    show_parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")

    init_parser = config_subparsers.add_parser("init", help="Create a default configuration file")
    init_parser.add_argument(
        "--path", default="docfix.json", help="Configuration file path (default: docfix.json)"
    )
    init_parser.add_argument(
        "--format", choices=["json", "yaml"], default="json", help="Configuration file format"
    )

    validate_parser = config_subparsers.add_parser("validate", help="Validate a configuration file")
    validate_parser.add_argument("config_file", help="Configuration file to validate")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging(args.verbose)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    set_rich_enabled(not args.no_rich and config.output_settings.use_rich)

    if args.command == "fix":
        cmd_fix(args, config)
    elif args.command == "check":
        cmd_check(args, config)
    elif args.command == "task":
        cmd_task(args, config)
    elif args.command == "info":
        cmd_info(args)
    elif args.command == "config":
        if not args.config_action:
            parser.parse_args(["config", "--help"])
        cmd_config(args, config)


if __name__ == "__main__":
    main()
