"""Shared helpers for serializing SARIF output and summarizing results."""
from __future__ import annotations

import json
from typing import IO, Iterable

LEVELS = ("error", "warning")


def render_json(data: dict, indent: int = 2) -> str:
    """Serialize ``data`` as indented JSON, keeping non-ASCII characters intact."""

    return json.dumps(data, indent=indent, ensure_ascii=False)


def dump_json(data: dict, output_handle: IO, indent: int = 2) -> None:
    """Write ``data`` as indented JSON followed by a newline."""

    output_handle.write(render_json(data, indent))
    output_handle.write("\n")


def summarize_levels(runs: Iterable[dict]) -> dict[str, int]:
    """Count results by level across serialized SARIF runs."""

    totals = {level: 0 for level in LEVELS}

    for run in runs:
        for result in run.get("results", []):
            level = result.get("level", "warning")
            if level in totals:
                totals[level] += 1

    return totals
