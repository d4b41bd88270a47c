"""Project a parsed oxlint report onto a SARIF v2.1.0 log."""
from __future__ import annotations

import re
from typing import Dict, List, Optional

from oxlint_sarif.models import Diagnostic, Label, Report, Severity, Span
from oxlint_sarif.parser import parse_report
from oxlint_sarif.sarif import (
    ArtifactLocation,
    Location,
    Message,
    PhysicalLocation,
    Region,
    ReportingDescriptor,
    Result,
    Run,
    SarifLog,
    Tool,
    ToolComponent,
)
from oxlint_sarif.utils import render_json

SARIF_SCHEMA = (
    "https://docs.oasis-open.org/sarif/sarif/v2.1.0/cos02/schemas/sarif-schema-2.1.0.json"
)
SARIF_VERSION = "2.1.0"
TOOL_NAME = "oxlint"
TOOL_INFORMATION_URI = "https://oxc.rs/docs/guide/usage/linter"
UNKNOWN_RULE_ID = "UnknownRule"
COLUMN_KIND = "utf16CodeUnits"

SEVERITY_LEVELS: Dict[Severity, str] = {"error": "error", "warning": "warning"}

_WINDOWS_ABSOLUTE = re.compile(r"^[a-zA-Z]:/")


def path_to_uri(path: str) -> str:
    """Return a SARIF artifact URI for ``path``.

    Absolute POSIX and Windows paths become ``file://`` URIs; relative paths
    are returned unchanged so consumers can resolve them against a base URI.
    """

    normalized = path.replace("\\", "/")
    if _WINDOWS_ABSOLUTE.match(normalized):
        return f"file:///{normalized}"
    if normalized.startswith("/"):
        return f"file://{normalized}"
    return normalized


def build_region(span: Span) -> Region:
    return Region(
        start_line=span.line,
        # Column 0 means "unknown"; SARIF columns are 1-based.
        start_column=span.column if span.column > 0 else None,
        end_column=span.column + span.length if span.length > 0 else None,
    )


def _related_location(label: Label, uri: str, location_id: int) -> Location:
    return Location(
        id=location_id,
        physical_location=PhysicalLocation(
            artifact_location=ArtifactLocation(uri=uri),
            region=build_region(label.span),
        ),
        message=Message(text=label.label) if label.label else None,
    )


def _rule_descriptor(rule_id: str, diagnostic: Diagnostic) -> ReportingDescriptor:
    return ReportingDescriptor(
        id=rule_id,
        short_description=Message(text=rule_id),
        help_uri=diagnostic.url or None,
        help=Message(text=diagnostic.help) if diagnostic.help else None,
    )


def _build_result(diagnostic: Diagnostic, rule_id: str, rule_index: int) -> Result:
    uri = path_to_uri(diagnostic.filename)

    text = diagnostic.message
    if diagnostic.help:
        text += f"\n{diagnostic.help}"

    primary = Location(
        physical_location=PhysicalLocation(
            artifact_location=ArtifactLocation(uri=uri),
            region=build_region(diagnostic.labels[0].span) if diagnostic.labels else None,
        )
    )

    related = None
    if len(diagnostic.labels) > 1:
        related = tuple(
            _related_location(label, uri, index)
            for index, label in enumerate(diagnostic.labels[1:], start=1)
        )

    return Result(
        rule_id=rule_id,
        rule_index=rule_index,
        level=SEVERITY_LEVELS[diagnostic.severity],
        message=Message(text=text),
        locations=(primary,),
        related_locations=related,
    )


def convert_report_to_sarif(report: Report, tool_version: Optional[str] = None) -> SarifLog:
    """Build a single-run SARIF log from ``report``.

    Each diagnostic becomes one result, in input order. Rules are keyed on
    the diagnostic code and registered once, in first-seen order.
    """

    rule_indexes: Dict[str, int] = {}
    rules: List[ReportingDescriptor] = []
    results: List[Result] = []

    for diagnostic in report.diagnostics:
        rule_id = diagnostic.code or UNKNOWN_RULE_ID
        if rule_id not in rule_indexes:
            rule_indexes[rule_id] = len(rules)
            rules.append(_rule_descriptor(rule_id, diagnostic))
        results.append(_build_result(diagnostic, rule_id, rule_indexes[rule_id]))

    driver = ToolComponent(
        name=TOOL_NAME,
        information_uri=TOOL_INFORMATION_URI,
        version=tool_version or None,
        rules=tuple(rules),
    )
    run = Run(tool=Tool(driver=driver), results=tuple(results), column_kind=COLUMN_KIND)

    return SarifLog(schema=SARIF_SCHEMA, version=SARIF_VERSION, runs=(run,))


def convert(raw_text: str, indent: int = 2, *, tool_version: Optional[str] = None) -> str:
    """Convert raw oxlint JSON into SARIF JSON text.

    Raises :class:`~oxlint_sarif.parser.ParseError` if ``raw_text`` is not an
    oxlint report.
    """

    report = parse_report(raw_text)
    return render_json(convert_report_to_sarif(report, tool_version).as_dict(), indent)
