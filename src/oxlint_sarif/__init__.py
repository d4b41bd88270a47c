"""Convert oxlint JSON reports into SARIF v2.1.0 logs."""

__version__ = "0.1.0"

from oxlint_sarif.converter import convert, convert_report_to_sarif  # noqa: E402
from oxlint_sarif.parser import ParseError, ParseErrorKind, parse_report  # noqa: E402

__all__ = [
    "ParseError",
    "ParseErrorKind",
    "__version__",
    "convert",
    "convert_report_to_sarif",
    "parse_report",
]
