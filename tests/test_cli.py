"""Pruebas de la interfaz de línea de comandos.

Tests for the command line interface.
"""

import json
import logging

import pytest
import structlog
from typer.testing import CliRunner

from benford_engine.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Español: Solo errores en los logs y restauración al terminar.

    English: Errors-only logging, restored after each test so handlers bound
    to the runner's streams do not leak into other tests.
    """
    monkeypatch.setenv("BENFORD_LOG_LEVEL", "ERROR")
    yield
    structlog.reset_defaults()
    logging.basicConfig(handlers=[logging.NullHandler()], force=True)


def _benford_text():
    counts = {1: 45, 2: 26, 3: 19, 4: 15, 5: 12, 6: 10, 7: 9, 8: 7, 9: 7}
    numbers = []
    for digit, count in counts.items():
        numbers.extend(str(digit * 10 ** (index % 4)) for index in range(count))
    return "Ledger totals: " + " ".join(numbers) + " end."


def test_analyze_prints_table_and_verdict(tmp_path):
    """Español: El comando muestra tabla y veredicto.

    English: The command prints the table and the verdict.
    """
    source = tmp_path / "ledger.txt"
    source.write_text(_benford_text(), encoding="utf-8")
    result = runner.invoke(app, ["analyze", str(source), "--batch-size", "25"])
    assert result.exit_code == 0, result.output
    assert "Digit" in result.stdout
    assert "Consistent with Benford's Law" in result.stdout


def test_analyze_json_output(tmp_path):
    source = tmp_path / "ledger.txt"
    source.write_text("500 " * 150, encoding="utf-8")
    result = runner.invoke(app, ["analyze", str(source), "--json", "--mode", "pixel"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["verdict"] == "not_applicable"
    assert payload["mode"] == "pixel"
    assert payload["histogram"][5] == 150


def test_analyze_without_numbers_exits_with_error(tmp_path):
    source = tmp_path / "empty.txt"
    source.write_text("no digits here", encoding="utf-8")
    result = runner.invoke(app, ["analyze", str(source)])
    assert result.exit_code == 1


def test_expected_lists_nine_digits():
    result = runner.invoke(app, ["expected"])
    assert result.exit_code == 0
    lines = result.stdout.strip().splitlines()
    assert lines[0] == "1: 30.1%"
    assert len(lines) == 9
