"""Typed model of an oxlint ``--format json`` report."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Tuple, Union

Number = Union[int, float]
Severity = Literal["error", "warning"]


@dataclass(frozen=True)
class Span:
    """Byte offset and length plus the 1-based line and column of a source span."""

    offset: Number = 0
    length: Number = 0
    line: Number = 1
    column: Number = 1


@dataclass(frozen=True)
class Label:
    span: Span = field(default_factory=Span)
    label: Optional[str] = None


@dataclass(frozen=True)
class RelatedInfo:
    message: Optional[str] = None
    labels: Optional[Tuple[Label, ...]] = None


@dataclass(frozen=True)
class Diagnostic:
    """A single linter finding.

    The first entry of ``labels`` is the primary location; any further
    labels are secondary spans in the same file.
    """

    message: str = ""
    code: str = ""
    severity: Severity = "warning"
    causes: Tuple[str, ...] = ()
    url: Optional[str] = None
    help: Optional[str] = None
    filename: str = ""
    labels: Tuple[Label, ...] = ()
    related: Tuple[RelatedInfo, ...] = ()


@dataclass(frozen=True)
class Report:
    """Root of a parsed report. ``number_of_rules`` is ``None`` when unknown."""

    diagnostics: Tuple[Diagnostic, ...] = ()
    number_of_files: Number = 0
    number_of_rules: Optional[Number] = None
    threads_count: Number = 1
    start_time: float = 0.0
