"""
Output formatters for CLI commands.

Turns fix reports and the plugin publishing descriptor into text or JSON.
"""

import json
from typing import Any, Dict

from docfix.api import FixReport
from docfix.plugin import PublicationMetadata


def format_report_json(report: FixReport) -> str:
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)


def format_report_summary(report: FixReport) -> str:
    """One line summary, e.g. ``Scanned 4 files: 1 fixed, 0 errors``."""
    verb = "would be fixed" if report.dryrun else "fixed"
    errors = len(report.errors)
    return (
        f"Scanned {report.files_scanned} file{'s' if report.files_scanned != 1 else ''}: "
        f"{report.files_changed} {verb}, {errors} error{'s' if errors != 1 else ''}"
    )


def format_descriptor_json(metadata: PublicationMetadata) -> str:
    return json.dumps(metadata.as_dict(), indent=2)


def descriptor_fields(metadata: PublicationMetadata) -> Dict[str, Any]:
    """Flatten the publishing descriptor into display rows."""
    data = metadata.as_dict()
    fields = {
        "groupId": data["groupId"],
        "artifactId": data["artifactId"],
        "version": data["version"],
        "plugin id": data["pluginId"],
        "implementation class": data["implementationClass"],
        "name": data["name"],
        "description": data["description"],
        "url": data["url"],
    }
    for license_info in data["licenses"]:
        fields["license"] = f"{license_info['name']} ({license_info['url']})"
    for developer in data["developers"]:
        fields["developer"] = f"{developer['name']} <{developer['email']}>"
    fields["scm connection"] = data["scm"]["connection"]
    fields["scm developer connection"] = data["scm"]["developerConnection"]
    fields["scm url"] = data["scm"]["url"]
    fields["requires"] = ", ".join(data["dependencies"])
    return fields
