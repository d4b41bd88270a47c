"""Command-line interface for oxlint-sarif."""

import click

from oxlint_sarif import __version__, io_utils
from oxlint_sarif.converter import convert_report_to_sarif
from oxlint_sarif.parser import ParseError, parse_report
from oxlint_sarif.utils import dump_json, summarize_levels


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--input",
    "-i",
    "input_path",
    type=click.Path(dir_okay=False),
    default=None,
    show_default="stdin",
    help="Path to the oxlint JSON input file.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    show_default="stdout",
    help="Path to write the SARIF output file, or '-' for stdout.",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=2,
    show_default=True,
    help="Number of spaces used to indent the SARIF JSON.",
)
@click.option(
    "--tool-version",
    default=None,
    help="Version of oxlint to record on the SARIF tool driver.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show progress and a summary of results.",
)
@click.option(
    "--fail-on-findings",
    "-f",
    is_flag=True,
    help="Exit with status 1 if the report contains any results.",
)
def main(input_path, output, indent, tool_version, verbose, fail_on_findings):
    """Convert oxlint JSON output to SARIF format."""

    source = io_utils.read_input(input_path)

    if verbose:
        click.echo(f"Reading {source.display_name}...", err=True)

    try:
        report = parse_report(source.text)
    except ParseError as exc:
        raise click.ClickException(f"Conversion failed: {exc}") from exc

    if verbose:
        click.echo(f"Parsed {len(report.diagnostics)} diagnostic(s)", err=True)

    sarif = convert_report_to_sarif(report, tool_version).as_dict()
    summary = summarize_levels(sarif["runs"])

    output_handle, should_close = io_utils.resolve_output_handle(output, mode="w")
    try:
        dump_json(sarif, output_handle, indent)
    except OSError as exc:
        raise click.ClickException(f'Cannot write output file "{output}": {exc}') from exc
    finally:
        if should_close:
            output_handle.close()

    if verbose:
        click.echo(
            f"Summary: error={summary['error']} warning={summary['warning']}",
            err=True,
        )

    if fail_on_findings and (summary["error"] or summary["warning"]):
        raise SystemExit(1)


if __name__ == "__main__":
    main()
