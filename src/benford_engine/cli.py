"""
======================== ÍNDICE / INDEX ========================
1. Descripción general / Overview
2. Componentes principales / Main components
3. Notas de mantenimiento / Maintenance notes

======================== ESPAÑOL ========================
Archivo: `src/benford_engine/cli.py`.
Interfaz de línea de comandos: lee un archivo de texto, extrae números y
ejecuta la corrida Benford con el planificador inmediato.

Componentes detectados:
  - main
  - analyze
  - expected

======================== ENGLISH ========================
File: `src/benford_engine/cli.py`.
Command line interface: reads a text file, extracts numbers and runs the
Benford analysis with the immediate scheduler.

Detected components:
  - main
  - analyze
  - expected
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from benford_engine.config import load_config
from benford_engine.core.digits import BENFORD_PERCENTAGES
from benford_engine.core.models import AnalysisMode
from benford_engine.errors import ChiSquaredComputationError
from benford_engine.logging import bind_context, setup_logging
from benford_engine.pipeline import analyze_tokens
from benford_engine.report import explain, render_table
from benford_engine.reporting import LoggingReporter
from benford_engine.sources import read_text_tokens

app = typer.Typer(help="Benford Engine CLI")


@app.callback()
def main() -> None:
    """Interfaz de línea de comandos de Benford Engine.

    English: Benford Engine command line interface.
    """


@app.command()
def analyze(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    mode: AnalysisMode = typer.Option(AnalysisMode.TEXT, "--mode", "-m", case_sensitive=False),
    batch_size: Optional[int] = typer.Option(None, "--batch-size", min=1),
    p_threshold: Optional[float] = typer.Option(None, "--p-threshold"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", exists=True, dir_okay=False),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """Analiza los números de un archivo de texto.

    English: Analyze the numbers found in a text file.
    """
    try:
        settings = load_config(
            config,
            BATCH_SIZE=batch_size,
            P_VALUE_THRESHOLD=p_threshold,
            ANALYSIS_MODE=mode,
        )
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    logger = setup_logging(settings.LOG_LEVEL, settings.LOG_DIR)
    logger = bind_context(logger, mode=mode.value, source=path.name)

    tokens = read_text_tokens(path)
    if not tokens:
        typer.echo("No valid numbers found in the text file.", err=True)
        raise typer.Exit(code=1)

    try:
        result = analyze_tokens(
            tokens,
            settings=settings,
            reporter=LoggingReporter(logger),
            mode=mode,
        )
    except ChiSquaredComputationError as exc:
        typer.echo(f"Chi-squared computation failed: {exc}", err=True)
        raise typer.Exit(code=2) from exc

    if as_json:
        payload = result.to_dict()
        payload["mode"] = mode.value
        typer.echo(json.dumps(payload, indent=2))
        return

    typer.echo(render_table(result.histogram))
    typer.echo("")
    typer.echo(explain(result, mode, min_samples=settings.MIN_SAMPLES))


@app.command()
def expected() -> None:
    """Muestra los porcentajes esperados de Benford.

    English: Print the expected Benford percentages.
    """
    for digit, percent in enumerate(BENFORD_PERCENTAGES, start=1):
        typer.echo(f"{digit}: {percent:.1f}%")


if __name__ == "__main__":
    app()
