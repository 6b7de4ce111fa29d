"""Typer CLI for baseboard cut planning."""

import logging
from pathlib import Path
from typing import Annotated, Any

import typer

from trimplan.application import OptimizeCutPlanCommand, PlanOutput
from trimplan.application.config import (
    ConfigError,
    OutputFormat,
    PlanConfiguration,
    load_config,
    merge_config_with_cli,
    validate_config,
)
from trimplan.infrastructure import (
    CutPlanFormatter,
    JsonExporter,
    ShoppingListFormatter,
    SummaryFormatter,
    UnplaceablePieceError,
)

app = typer.Typer(
    name="trimplan",
    help="Plan baseboard cuts from wall measurements with minimal waste.",
)


def parse_measure_option(value: str) -> dict[str, Any]:
    """Parse a --measure value of the form SIZE[:ROOM[:WALL]].

    Examples:
        >>> parse_measure_option("132 1/4:Living Room:North")
        {'size': '132 1/4', 'room': 'Living Room', 'wall': 'North'}
        >>> parse_measure_option("45.5")
        {'size': '45.5'}
    """
    size, *labels = value.split(":", 2)
    entry: dict[str, Any] = {"size": size.strip()}
    for key, label in zip(("room", "wall"), labels):
        if label.strip():
            entry[key] = label.strip()
    return entry


def report_config_error(error: ConfigError) -> None:
    """Print a configuration error with one line per problem to stderr."""
    typer.echo(f"Error: {error.message.splitlines()[0].rstrip(':')}", err=True)
    for detail in error.details:
        if "line" in detail:
            typer.echo(
                f"  line {detail['line']}, column {detail['column']}: {detail['message']}",
                err=True,
            )
        else:
            typer.echo(f"  {detail['path']}: {detail['message']}", err=True)


def render_output(output: PlanOutput, output_format: OutputFormat) -> str:
    """Render a plan in the requested format."""
    plan = output.plan

    if output_format == OutputFormat.JSON:
        return JsonExporter().export(plan, output.warnings)

    suffix = f" - {output.room}" if output.room else ""
    sections: list[str] = []
    if output_format in (OutputFormat.ALL, OutputFormat.SUMMARY):
        sections.append(SummaryFormatter().format(plan.summary, title=f"SUMMARY{suffix}"))
    if output_format in (OutputFormat.ALL, OutputFormat.SHOPPING):
        sections.append(ShoppingListFormatter().format(plan.summary))
    if output_format in (OutputFormat.ALL, OutputFormat.PLAN):
        sections.append(CutPlanFormatter().format(plan))
    return "\n\n".join(sections)


@app.command()
def optimize(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    measure: Annotated[
        list[str] | None,
        typer.Option(
            "--measure",
            "-m",
            help='Measurement as SIZE[:ROOM[:WALL]], e.g. "83 5/16:Kitchen:East"',
        ),
    ] = None,
    length: Annotated[
        list[float] | None,
        typer.Option("--length", "-l", help="Available board length in inches"),
    ] = None,
    kerf: Annotated[
        float | None,
        typer.Option("--kerf", "-k", help="Saw kerf in inches (default: 0.125)"),
    ] = None,
    balanced: Annotated[
        list[str] | None,
        typer.Option("--balanced", help="Measurement id to split into even pieces"),
    ] = None,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format"),
    ] = None,
    room: Annotated[
        str | None,
        typer.Option("--room", help="Only show boards with cuts from this room"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the plan to this file"),
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Fail if any piece cannot be placed"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show optimizer log output"),
    ] = False,
) -> None:
    """Compute the cutting plan for a set of wall measurements.

    Measurements come from --config, --measure, or both; CLI options
    override config file values.

    Examples:
        trimplan optimize -m 50 -m "132 1/4:Living Room:North"
        trimplan optimize --config house.json
        trimplan optimize --config house.json --length 96 --length 144 --format json
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(config_file) if config_file else PlanConfiguration()
        config = merge_config_with_cli(
            config,
            measurements=[parse_measure_option(value) for value in measure or []],
            available_lengths=length,
            kerf=kerf,
            balanced_ids=balanced,
            output_format=output_format.value if output_format else None,
            room=room,
        )
    except ConfigError as e:
        report_config_error(e)
        raise typer.Exit(code=1)

    command = OptimizeCutPlanCommand()
    try:
        output = command.execute_config(config, strict=strict)
    except UnplaceablePieceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    for warning in output.warnings:
        typer.echo(f"Warning: {warning.message}", err=True)

    text = render_output(output, config.output.format)
    if output_file is not None:
        output_file.write_text(text + "\n", encoding="utf-8")
        typer.echo(f"Plan written to {output_file}")
    else:
        typer.echo(text)


@app.command()
def validate(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to check"),
    ],
) -> None:
    """Check a configuration file without planning.

    Exit code is 0 when the file is clean, 1 when it has errors and 2 when
    it only has warnings (duplicate lengths, blank rows, no-op split flags
    and the like).
    """
    try:
        config = load_config(config_file)
    except ConfigError as e:
        report_config_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    for error in result.errors:
        typer.echo(f"Error: {error.path}: {error.message}", err=True)
    for warning in result.warnings:
        hint = f" ({warning.suggestion})" if warning.suggestion else ""
        typer.echo(f"Warning: {warning.path}: {warning.message}{hint}", err=True)

    typer.echo(
        f"{config_file}: {len(result.errors)} error(s), "
        f"{len(result.warnings)} warning(s)"
    )
    raise typer.Exit(code=result.exit_code)


if __name__ == "__main__":
    app()
