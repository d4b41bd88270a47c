"""Parse and normalize oxlint JSON output into a :class:`~oxlint_sarif.models.Report`.

The parser is strict about the document as a whole and lenient about
individual fields: a missing ``diagnostics`` array is an error, a missing
span column is not.
"""
from __future__ import annotations

import json
import math
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from oxlint_sarif.models import (
    Diagnostic,
    Label,
    Number,
    RelatedInfo,
    Report,
    Severity,
    Span,
)

REQUIRED_DIAGNOSTIC_KEYS = ("message", "code", "severity", "filename")

_MISSING = object()


class ParseErrorKind(str, Enum):
    EMPTY_INPUT = "EmptyInput"
    MALFORMED_JSON = "MalformedJson"
    INVALID_SHAPE = "InvalidShape"


class ParseError(ValueError):
    """Raised when the input cannot be read as an oxlint report at all."""

    def __init__(self, kind: ParseErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


def _is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, list)


def _to_number(value: Any, default: Number) -> Number:
    """Coerce a JSON value to a number, returning ``default`` when that is not possible."""

    if value is None:
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return default
        try:
            number = float(text)
        except ValueError:
            return default
    else:
        return default

    if isinstance(number, float):
        if not math.isfinite(number):
            return default
        if number.is_integer():
            return int(number)
    return number


def _to_string(value: Any) -> str:
    """Render a JSON value as text the way the linter's own tooling would."""

    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, separators=(",", ":"))


def _string_or_empty(value: Any) -> str:
    return "" if value is None else _to_string(value)


def _optional_string(value: Any) -> Optional[str]:
    return None if value is _MISSING else _to_string(value)


def _normalize_severity(value: Any) -> Severity:
    severity = _to_string("warning" if value is None else value).lower()
    if severity == "error":
        return "error"
    # "warning", "warn" and anything unrecognized all degrade to a warning.
    return "warning"


def _parse_span(raw: Any) -> Span:
    if not _is_object(raw):
        raw = {}
    return Span(
        offset=_to_number(raw.get("offset"), 0),
        length=_to_number(raw.get("length"), 0),
        line=_to_number(raw.get("line"), 1),
        column=_to_number(raw.get("column"), 1),
    )


def _parse_label(raw: Mapping[str, Any]) -> Label:
    text = raw.get("label")
    return Label(
        span=_parse_span(raw.get("span")),
        label=text if isinstance(text, str) else None,
    )


def _parse_labels(raw: Any) -> Optional[Tuple[Label, ...]]:
    if not _is_sequence(raw):
        return None
    return tuple(_parse_label(item) for item in raw if _is_object(item))


def _parse_related(raw: Mapping[str, Any]) -> RelatedInfo:
    return RelatedInfo(
        message=_optional_string(raw.get("message", _MISSING)),
        labels=_parse_labels(raw.get("labels")),
    )


def _reject_constant(token: str) -> Any:
    # NaN and Infinity are accepted by the json module but are not JSON.
    raise ValueError(f"Unexpected token {token!r}")


def _is_diagnostic(raw: Any) -> bool:
    return _is_object(raw) and all(key in raw for key in REQUIRED_DIAGNOSTIC_KEYS)


def _parse_diagnostic(raw: Mapping[str, Any]) -> Diagnostic:
    causes = raw.get("causes")
    related = raw.get("related")
    return Diagnostic(
        message=_string_or_empty(raw.get("message")),
        code=_string_or_empty(raw.get("code")),
        severity=_normalize_severity(raw.get("severity")),
        causes=tuple(_to_string(cause) for cause in causes) if _is_sequence(causes) else (),
        url=_optional_string(raw.get("url", _MISSING)),
        help=_optional_string(raw.get("help", _MISSING)),
        filename=_string_or_empty(raw.get("filename")),
        labels=_parse_labels(raw.get("labels")) or (),
        related=(
            tuple(_parse_related(item) for item in related if _is_object(item))
            if _is_sequence(related)
            else ()
        ),
    )


def parse_report(raw_text: str) -> Report:
    """Parse the raw JSON emitted by ``oxlint --format json``.

    Malformed diagnostic entries are dropped and malformed fields fall back
    to defaults. Only problems with the document itself raise.

    Raises
    ------
    ParseError
        With kind ``EMPTY_INPUT`` for blank input, ``MALFORMED_JSON`` when the
        text is not JSON, or ``INVALID_SHAPE`` when there is no top-level
        ``diagnostics`` array.
    """

    if not raw_text.strip():
        raise ParseError(ParseErrorKind.EMPTY_INPUT, "Input JSON content is empty")

    try:
        document = json.loads(raw_text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        raise ParseError(
            ParseErrorKind.MALFORMED_JSON, f"Failed to parse JSON: {exc}"
        ) from exc

    if not _is_object(document) or not _is_sequence(document.get("diagnostics")):
        raise ParseError(
            ParseErrorKind.INVALID_SHAPE,
            'Invalid oxlint JSON: missing "diagnostics" array',
        )

    number_of_rules = document.get("number_of_rules")

    return Report(
        diagnostics=tuple(
            _parse_diagnostic(item)
            for item in document["diagnostics"]
            if _is_diagnostic(item)
        ),
        number_of_files=_to_number(document.get("number_of_files"), 0),
        number_of_rules=(
            None if number_of_rules is None else _to_number(number_of_rules, None)
        ),
        threads_count=_to_number(document.get("threads_count"), 1),
        start_time=float(_to_number(document.get("start_time"), 0)),
    )
