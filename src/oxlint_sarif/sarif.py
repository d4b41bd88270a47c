"""Immutable value objects for the subset of SARIF v2.1.0 emitted by the converter."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


def _compact(data: dict) -> dict:
    return {key: value for key, value in data.items() if value is not None}


@dataclass(frozen=True)
class Message:
    text: str

    def as_dict(self) -> dict:
        return {"text": self.text}


@dataclass(frozen=True)
class Region:
    """A 1-based line with optional 1-based start and exclusive end columns."""

    start_line: int
    start_column: Optional[int] = None
    end_column: Optional[int] = None

    def as_dict(self) -> dict:
        return _compact(
            {
                "startLine": self.start_line,
                "startColumn": self.start_column,
                "endColumn": self.end_column,
            }
        )


@dataclass(frozen=True)
class ArtifactLocation:
    uri: str

    def as_dict(self) -> dict:
        return {"uri": self.uri}


@dataclass(frozen=True)
class PhysicalLocation:
    artifact_location: ArtifactLocation
    region: Optional[Region] = None

    def as_dict(self) -> dict:
        return _compact(
            {
                "artifactLocation": self.artifact_location.as_dict(),
                "region": self.region.as_dict() if self.region else None,
            }
        )


@dataclass(frozen=True)
class Location:
    physical_location: PhysicalLocation
    id: Optional[int] = None
    message: Optional[Message] = None

    def as_dict(self) -> dict:
        return _compact(
            {
                "id": self.id,
                "physicalLocation": self.physical_location.as_dict(),
                "message": self.message.as_dict() if self.message else None,
            }
        )


@dataclass(frozen=True)
class ReportingDescriptor:
    """A rule entry in ``tool.driver.rules``."""

    id: str
    short_description: Message
    help_uri: Optional[str] = None
    help: Optional[Message] = None

    def as_dict(self) -> dict:
        return _compact(
            {
                "id": self.id,
                "shortDescription": self.short_description.as_dict(),
                "helpUri": self.help_uri,
                "help": self.help.as_dict() if self.help else None,
            }
        )


@dataclass(frozen=True)
class ToolComponent:
    name: str
    information_uri: Optional[str] = None
    version: Optional[str] = None
    rules: Tuple[ReportingDescriptor, ...] = ()

    def as_dict(self) -> dict:
        return _compact(
            {
                "name": self.name,
                "informationUri": self.information_uri,
                "version": self.version,
                "rules": [rule.as_dict() for rule in self.rules],
            }
        )


@dataclass(frozen=True)
class Tool:
    driver: ToolComponent

    def as_dict(self) -> dict:
        return {"driver": self.driver.as_dict()}


@dataclass(frozen=True)
class Result:
    rule_id: str
    rule_index: int
    level: str
    message: Message
    locations: Tuple[Location, ...] = ()
    related_locations: Optional[Tuple[Location, ...]] = None

    def as_dict(self) -> dict:
        return _compact(
            {
                "level": self.level,
                "message": self.message.as_dict(),
                "ruleId": self.rule_id,
                "ruleIndex": self.rule_index,
                "locations": [location.as_dict() for location in self.locations],
                "relatedLocations": (
                    [location.as_dict() for location in self.related_locations]
                    if self.related_locations is not None
                    else None
                ),
            }
        )


@dataclass(frozen=True)
class Run:
    tool: Tool
    results: Tuple[Result, ...] = ()
    column_kind: Optional[str] = None

    def as_dict(self) -> dict:
        return _compact(
            {
                "tool": self.tool.as_dict(),
                "results": [result.as_dict() for result in self.results],
                "columnKind": self.column_kind,
            }
        )


@dataclass(frozen=True)
class SarifLog:
    schema: str
    version: str
    runs: Tuple[Run, ...] = ()

    def as_dict(self) -> dict:
        return {
            "$schema": self.schema,
            "version": self.version,
            "runs": [run.as_dict() for run in self.runs],
        }
