"""Shared utilities for handling CLI input and output streams."""
from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Optional, Tuple

import click

NO_INPUT_MESSAGE = (
    "No input provided. Use --input <path> or pipe input via stdin.\n"
    "Example: oxlint-sarif --input oxlint-output.json\n"
    "         oxlint --format json | oxlint-sarif"
)


@dataclass
class InputSource:
    """The raw report text together with where it came from."""

    path: str
    text: str
    is_stdin: bool = False

    @property
    def display_name(self) -> str:
        return "stdin" if self.is_stdin else self.path


def _stdin_is_interactive() -> bool:
    return click.get_text_stream("stdin").isatty()


def read_input(path: Optional[str]) -> InputSource:
    """Read report text from ``path``, or from piped stdin when no path is given."""

    if path and path != "-":
        try:
            with open(path, "r", encoding="utf-8") as handle:
                return InputSource(path=path, text=handle.read())
        except (OSError, UnicodeDecodeError) as exc:
            raise click.ClickException(f'Cannot read input file "{path}": {exc}') from exc

    if path is None and _stdin_is_interactive():
        raise click.ClickException(NO_INPUT_MESSAGE)

    try:
        text = click.get_text_stream("stdin").read()
    except (OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(f"Failed to read from stdin: {exc}") from exc
    return InputSource(path="-", text=text, is_stdin=True)


def resolve_output_handle(output: Optional[str], mode: str = "w") -> Tuple[IO, bool]:
    """Return an output handle and whether it should be closed by the caller."""

    if output is None or output == "-":
        return click.get_text_stream("stdout"), False

    try:
        return open(output, mode, encoding="utf-8"), True
    except OSError as exc:
        raise click.ClickException(f'Cannot write output file "{output}": {exc}') from exc
