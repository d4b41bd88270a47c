"""Structural checks against the SARIF v2.1.0 object model."""
from __future__ import annotations

import json

import pytest

from oxlint_sarif import convert
from tests.report_factory import load_fixture, raw_diagnostic, report_json

FIXTURES = ["single-error.json", "multiple-diagnostics.json", "empty-diagnostics.json"]

VALID_LEVELS = {"none", "note", "warning", "error"}
VALID_COLUMN_KINDS = {"utf16CodeUnits", "unicodeCodePoints"}


def _documents():
    documents = [json.loads(convert(load_fixture(name))) for name in FIXTURES]
    documents.append(
        json.loads(
            convert(
                report_json(
                    raw_diagnostic(
                        severity="CUSTOM",
                        code="",
                        labels=[
                            {"span": {"offset": 0, "length": 0, "line": 4, "column": 0}},
                            {"label": "also", "span": {"offset": 2, "length": 1, "line": 5, "column": 2}},
                            {"span": {}},
                        ],
                    ),
                    raw_diagnostic(labels=[]),
                )
            )
        )
    )
    return documents


def _locations(result):
    yield from result.get("locations", [])
    yield from result.get("relatedLocations", [])


@pytest.fixture(params=range(len(FIXTURES) + 1))
def document(request):
    return _documents()[request.param]


def test_root_object(document):
    assert document["version"] == "2.1.0"
    assert isinstance(document["runs"], list)
    assert len(document["runs"]) == 1
    assert document["$schema"].startswith("https://")


def test_run_object(document):
    for run in document["runs"]:
        assert isinstance(run["tool"]["driver"]["name"], str)
        assert isinstance(run["results"], list)
        assert run["columnKind"] in VALID_COLUMN_KINDS
        assert isinstance(run["tool"]["driver"]["rules"], list)
        for rule in run["tool"]["driver"]["rules"]:
            assert isinstance(rule["id"], str) and rule["id"]


def test_result_object(document):
    for run in document["runs"]:
        rules = run["tool"]["driver"]["rules"]
        for result in run["results"]:
            assert isinstance(result["message"]["text"], str)
            assert result["level"] in {"error", "warning"}
            assert result["level"] in VALID_LEVELS
            assert isinstance(result["ruleIndex"], int) and result["ruleIndex"] >= 0
            assert rules[result["ruleIndex"]]["id"] == result["ruleId"]
            assert isinstance(result["locations"], list)


def test_location_and_region_objects(document):
    for run in document["runs"]:
        for result in run["results"]:
            for location in _locations(result):
                physical = location["physicalLocation"]
                assert isinstance(physical["artifactLocation"]["uri"], str)
                region = physical.get("region")
                if region is None:
                    continue
                assert isinstance(region["startLine"], int) and region["startLine"] >= 1
                if "startColumn" in region:
                    assert region["startColumn"] >= 1
                if "endColumn" in region:
                    assert region["endColumn"] >= 1


def test_related_location_ids_are_unique_per_result(document):
    for run in document["runs"]:
        for result in run["results"]:
            related = result.get("relatedLocations")
            if related is None:
                continue
            assert related
            ids = [location["id"] for location in related]
            assert ids == list(range(1, len(ids) + 1))
