"""Suggest command - propose source columns for the fields of a target shape.

This module is a thin adapter between click and the application layer's
SuggestMappingUseCase. It parses arguments, builds the request, runs the use
case and renders the response.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path
from typing import cast

import click
from rich.console import Console

from ...application.models import SuggestMappingRequest
from ...config import ConfigLoader
from ...constants import OutputFormats
from ...infrastructure.container import DependencyContainer
from ..presenters.suggestions import SuggestionsPresenter

console = Console()


@dataclass(frozen=True)
class SuggestCommandOptions:
    columns: tuple[str, ...]
    columns_from: Path | None
    config_file: Path | None
    report_path: Path | None
    output_format: str
    strict: bool
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> SuggestCommandOptions:
        return cls(
            columns=cast("tuple[str, ...]", options.get("columns") or ()),
            columns_from=cast("Path | None", options.get("columns_from")),
            config_file=cast("Path | None", options.get("config_file")),
            report_path=cast("Path | None", options.get("report_path")),
            output_format=(
                OutputFormats.JSON if options.get("json_output") else OutputFormats.TABLE
            ),
            strict=cast("bool", options["strict"]),
            verbose=cast("int", options["verbose"]),
        )


@click.command()
@click.argument("schema_json", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--columns-from",
    "columns_from",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="CSV file whose header row lists the import columns",
)
@click.option(
    "-c",
    "--column",
    "columns",
    multiple=True,
    help="Import column name (repeat for each column)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a mapping_suggester.toml config file (default: ./mapping_suggester.toml)",
)
@click.option(
    "--report",
    "report_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write the full mapping report as JSON to this path",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Print the mapping as JSON instead of a table",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with an error when a required field has no suggested column",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def suggest_command(schema_json: Path, **options: object) -> None:
    """Suggest import columns for each field of a target shape.

    SCHEMA_JSON is a target shape document: an object with a ``fields`` list,
    or a bare list of field objects (id, name, type, required).

    Examples:

    \b
        # Columns from a CSV header
        mapping-suggester suggest contacts.json --columns-from export.csv

    \b
        # Columns given inline, JSON output
        mapping-suggester suggest contacts.json -c fname -c lname -c email --json
    """
    command_options = SuggestCommandOptions.from_kwargs(dict(options))

    if bool(command_options.columns) == (command_options.columns_from is not None):
        raise click.UsageError("Give exactly one of --columns-from or --column.")

    try:
        matcher_config = ConfigLoader.load(config_file=command_options.config_file)
    except ValueError as exc:
        raise click.ClickException(f"Invalid matcher configuration: {exc}") from exc

    json_output = command_options.output_format == OutputFormats.JSON
    container = DependencyContainer(
        verbose=command_options.verbose,
        console=console,
        use_null_logger=json_output,
        config=matcher_config,
    )
    use_case = container.create_suggest_mapping_use_case()

    request = SuggestMappingRequest(
        shape_path=schema_json,
        columns=list(command_options.columns),
        columns_path=command_options.columns_from,
        report_path=command_options.report_path,
        verbose=command_options.verbose,
    )
    response = use_case.execute(request)

    if not response.success or response.report is None:
        raise click.ClickException(response.error or "Mapping suggestion failed")

    if json_output:
        click.echo(json.dumps(response.to_dict(), indent=2))
    else:
        SuggestionsPresenter(console).present(
            response.report, title=f"Mapping Suggestions: {response.shape_id}"
        )

    if command_options.strict and not response.can_apply:
        missing = ", ".join(response.report.unmapped_required_fields)
        raise click.ClickException(f"Required fields without a column: {missing}")
