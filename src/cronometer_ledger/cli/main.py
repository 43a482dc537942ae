"""
Command-line interface for Cronometer Ledger.

Provides commands for parsing local servings, exercises and biometrics exports.
"""

from pathlib import Path

import typer

from cronometer_ledger.domain.records import ExportKind
from cronometer_ledger.infrastructure.parsers.export_parser import ExportParser
from cronometer_ledger.utils.exceptions import CronometerLedgerError
from cronometer_ledger.utils.logging_config import get_logger, setup_logging
from cronometer_ledger.utils.parameters import ParameterLoader

app = typer.Typer(help="Cronometer Ledger - typed records from Cronometer CSV exports")

logger = get_logger(__name__)


def init_config(config_path: str | None = None) -> ParameterLoader:
    """
    Initialize configuration and logging.

    Args:
        config_path: Path to configuration file, or None for defaults.

    Returns:
        Parameter loader instance.
    """
    param_loader = ParameterLoader(config_path)
    setup_logging(param_loader.get_logging_config())
    return param_loader


def run_parse(
    kind: ExportKind, file_path: Path, config_path: str | None, timezone: str | None
) -> None:
    """
    Parse one export file and echo a summary.

    Args:
        kind: Export family to parse the file as.
        file_path: Local export file.
        config_path: Path to configuration file, or None for defaults.
        timezone: Override timezone from config.
    """
    try:
        param_loader = init_config(config_path)
        processing_config = param_loader.get_processing_config()
        csv_config = param_loader.get_csv_config()

        if timezone:
            processing_config.timezone = timezone

        if not file_path.is_file():
            raise CronometerLedgerError(f"Export file not found: {file_path}")

        logger.info(f"Parsing {file_path.name} as {kind.value} export")

        with open(file_path, encoding=csv_config.encoding, newline="") as f:
            records = ExportParser(kind).parse(f, processing_config.timezone)

        typer.echo(f"Parsed {len(records)} {kind.value} records from {file_path.name}")
        if records:
            typer.echo(f"  First: {records[0].recorded_time.isoformat()}")
            typer.echo(f"  Last: {records[-1].recorded_time.isoformat()}")

    except CronometerLedgerError as e:
        logger.error(f"Parse failed: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e


@app.command()
def servings(
    file_path: Path = typer.Argument(..., help="Servings export CSV"),
    config_path: str | None = typer.Option(None, help="Path to configuration file"),
    timezone: str | None = typer.Option(None, help="Override timezone from config"),
) -> None:
    """Parse a servings (food diary) export."""
    run_parse(ExportKind.SERVINGS, file_path, config_path, timezone)


@app.command()
def exercises(
    file_path: Path = typer.Argument(..., help="Exercises export CSV"),
    config_path: str | None = typer.Option(None, help="Path to configuration file"),
    timezone: str | None = typer.Option(None, help="Override timezone from config"),
) -> None:
    """Parse an exercises export."""
    run_parse(ExportKind.EXERCISES, file_path, config_path, timezone)


@app.command()
def biometrics(
    file_path: Path = typer.Argument(..., help="Biometrics export CSV"),
    config_path: str | None = typer.Option(None, help="Path to configuration file"),
    timezone: str | None = typer.Option(None, help="Override timezone from config"),
) -> None:
    """Parse a biometrics export."""
    run_parse(ExportKind.BIOMETRICS, file_path, config_path, timezone)


if __name__ == "__main__":
    app()
