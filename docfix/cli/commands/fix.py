"""
Fixing commands for the docfix CLI: fix and check.
"""

import sys

from docfix.api import DocFixer, FixReport
from docfix.cli.formatters import format_report_json, format_report_summary
from docfix.cli.rich_output import get_rich_output
from docfix.config import DocFixConfig
from docfix.errors import DocFixError


def _run(args, config: DocFixConfig, dryrun) -> FixReport:
    fixer = DocFixer(config)
    try:
        return fixer.fix_path(
            args.path,
            dryrun=dryrun,
            encoding=args.encoding,
            max_depth=args.max_depth,
        )
    except (FileNotFoundError, DocFixError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _print_report(args, report: FixReport, config: DocFixConfig) -> None:
    if args.format == "json":
        print(format_report_json(report))
        return

    output = get_rich_output()
    for change in report.changes:
        if report.dryrun:
            if config.output_settings.show_changed_lines:
                output.print_changed_file(change.relative_path, change.changed_lines)
            else:
                output.print_info(change.relative_path)
        else:
            output.print_success(f"Fixed: {change.relative_path}")
    for error in report.errors:
        output.print_error(error)
    output.print_info(format_report_summary(report))


def cmd_fix(args, config: DocFixConfig) -> None:
    """Handle fix command."""
    # Leave dryrun to the configuration unless the flag was given
    report = _run(args, config, dryrun=True if args.dryrun else None)
    _print_report(args, report, config)
    if not report.success:
        sys.exit(1)


def cmd_check(args, config: DocFixConfig) -> None:
    """Handle check command: exit 1 when any file would change."""
    report = _run(args, config, dryrun=True)
    _print_report(args, report, config)

    if not report.success:
        sys.exit(1)
    if report.changes:
        if args.format != "json":
            get_rich_output().print_warning(
                f"{report.files_changed} file(s) have Javadoc comments to fix"
            )
        sys.exit(1)
    if args.format != "json":
        get_rich_output().print_success("All Javadoc comments follow the guidelines")
