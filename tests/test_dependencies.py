"""Tests to verify required dependencies and the console script are available."""
from importlib.metadata import entry_points


def test_click_import():
    """Test that click can be imported."""
    import click
    assert click is not None


def test_console_script_resolves_to_cli():
    """Test that the oxlint-sarif console script points at the click command."""
    from oxlint_sarif.cli import main

    scripts = entry_points()
    if hasattr(scripts, "select"):
        scripts = scripts.select(group="console_scripts")
    else:
        scripts = scripts.get("console_scripts", [])

    matches = [script for script in scripts if script.name == "oxlint-sarif"]
    assert len(matches) == 1
    assert matches[0].value == "oxlint_sarif.cli:main"
    assert matches[0].load() is main
