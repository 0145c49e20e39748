"""
Build plugin commands for the docfix CLI.

- task: apply the plugin to a project directory and run its docfix task
- info: show the plugin's publishing descriptor
"""

import sys
from pathlib import Path

from docfix.cli.formatters import descriptor_fields, format_descriptor_json, format_report_summary
from docfix.cli.rich_output import get_rich_output
from docfix.config import DocFixConfig
from docfix.errors import InvalidEncodingError
from docfix.plugin import DESCRIPTION, PUBLICATION, DocFixPlugin, Project


def cmd_task(args, config: DocFixConfig) -> None:
    """Handle task command."""
    settings = config.task_settings
    output = get_rich_output()

    project = Project(
        Path(args.project_dir),
        java_source_dirs=args.source_dir or [settings.source_directory],
    )
    task = DocFixPlugin().apply(project)
    task.encoding = args.encoding or settings.encoding
    task.dryrun = args.dryrun or settings.dryrun

    try:
        report = task.run()
    except InvalidEncodingError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if report is None:
        output.print_warning(f"Nothing to fix: no source directory at {task.source_directory}")
        return

    for change in report.changes:
        if report.dryrun:
            output.print_changed_file(change.relative_path, change.changed_lines)
        else:
            output.print_success(f"Fixed: {change.relative_path}")
    for error in report.errors:
        output.print_error(error)
    output.print_info(format_report_summary(report))


def cmd_info(args) -> None:
    """Handle info command."""
    if args.format == "json":
        print(format_descriptor_json(PUBLICATION))
        return

    output = get_rich_output()
    output.print_header(PUBLICATION.name, DESCRIPTION)
    output.print_key_values("Publishing descriptor", descriptor_fields(PUBLICATION))
