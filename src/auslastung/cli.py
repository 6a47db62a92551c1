"""Command-line interface for the auslastung table builder."""

import json
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console

if TYPE_CHECKING:
    from auslastung.config.settings import PipelineConfig

app = typer.Typer(
    name="auslastung",
    help="Workforce utilisation table from employee and external records.",
    no_args_is_help=True,
)

console = Console()

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration YAML file.",
        exists=True,
        dir_okay=False,
    ),
]
InputOption = Annotated[
    Path | None,
    typer.Option(
        "--input",
        "-i",
        help="Source JSON document. Overrides data.source from the config.",
        dir_okay=False,
    ),
]
LogLevelOption = Annotated[
    str | None,
    typer.Option(
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR). Overrides the config.",
    ),
]


def _prepare(
    config: Path | None,
    input_path: Path | None,
    log_level: str | None,
) -> "PipelineConfig":
    """Load configuration and set up logging."""
    from auslastung.config.loader import default_config, load_config
    from auslastung.utils.logging import configure_logging

    try:
        pipeline_config = load_config(config) if config else default_config(input_path)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(code=1) from e

    configure_logging(
        level=log_level or pipeline_config.logging.level,
        json_output=pipeline_config.logging.json_output,
    )
    return pipeline_config


@app.command()
def table(
    config: ConfigOption = None,
    input_path: InputOption = None,
    sort_by: Annotated[
        str | None,
        typer.Option(
            "--sort-by",
            "-s",
            help="Row key to sort by (e.g. person, y2d, may).",
        ),
    ] = None,
    descending: Annotated[
        bool,
        typer.Option("--descending", help="Sort in descending order."),
    ] = False,
    page: Annotated[
        int,
        typer.Option("--page", "-p", min=1, help="Page to show (1-based)."),
    ] = 1,
    page_size: Annotated[
        int | None,
        typer.Option(
            "--page-size",
            min=1,
            help="Rows per page. Defaults to table.page_size from the config.",
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: 'table' or 'json'."),
    ] = "table",
    log_level: LogLevelOption = None,
) -> None:
    """Build the utilisation table and print it."""
    from auslastung.etl import TablePipeline, run_table
    from auslastung.presentation import TableRenderer

    if output_format not in ["table", "json"]:
        console.print(
            f"[red]Error: Invalid format '{output_format}'. Use 'table' or 'json'.[/red]"
        )
        raise typer.Exit(code=1)

    pipeline_config = _prepare(config, input_path, log_level)

    try:
        result = run_table(pipeline_config, source_path=input_path)

        if output_format == "json":
            typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
            return

        frame = TablePipeline(pipeline_config.table).to_frame(result)
        renderer = TableRenderer(console, missing_value=pipeline_config.table.missing_value)
        renderer.print_table(
            frame,
            result.columns,
            sort_by=sort_by,
            descending=descending,
            page=page,
            page_size=page_size or pipeline_config.table.page_size,
            title=f"Workforce Utilisation ({pipeline_config.project})",
        )

    except FileNotFoundError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e
    except KeyError as e:
        console.print(f"[red]Error: {e.args[0]}[/red]")
        raise typer.Exit(code=1) from e
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e


@app.command()
def months(
    config: ConfigOption = None,
    input_path: InputOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Show the month columns discovered in the source document."""
    from auslastung.etl import run_table

    pipeline_config = _prepare(config, input_path, log_level)

    try:
        result = run_table(pipeline_config, source_path=input_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e

    if not result.months:
        console.print("[yellow]No monthly utilisation data found[/yellow]")
        return

    console.print(f"[blue]Month columns ({len(result.months)}):[/blue]")
    for month in result.months:
        console.print(f"  {month}")


@app.command()
def version() -> None:
    """Show version information."""
    from auslastung import __version__

    console.print(f"auslastung version {__version__}")


if __name__ == "__main__":
    app()
