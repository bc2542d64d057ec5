"""Pruebas de carga de configuración.

Tests for configuration loading.
"""

from pathlib import Path

import pytest

from benford_engine.config import load_config
from benford_engine.core.models import AnalysisMode


def test_defaults_match_reference_constants(monkeypatch):
    """Español: Los valores por defecto conservan lote 100 y p 0.05.

    English: Defaults keep batch size 100 and p threshold 0.05.
    """
    for name in ("BATCH_SIZE", "P_VALUE_THRESHOLD", "MIN_SAMPLES", "MIN_RANGE_RATIO", "ANALYSIS_MODE"):
        monkeypatch.delenv(f"BENFORD_{name}", raising=False)
    settings = load_config()
    assert settings.BATCH_SIZE == 100
    assert settings.P_VALUE_THRESHOLD == 0.05
    assert settings.MIN_SAMPLES == 100
    assert settings.MIN_RANGE_RATIO == 100.0
    assert settings.ANALYSIS_MODE is AnalysisMode.TEXT


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("BENFORD_BATCH_SIZE", "250")
    monkeypatch.setenv("BENFORD_ANALYSIS_MODE", "pixel")
    monkeypatch.setenv("BENFORD_LOG_LEVEL", "debug")
    settings = load_config()
    assert settings.BATCH_SIZE == 250
    assert settings.ANALYSIS_MODE is AnalysisMode.PIXEL
    assert settings.LOG_LEVEL == "DEBUG"


def test_yaml_file_and_explicit_overrides(tmp_path: Path):
    config_file = tmp_path / "benford.yaml"
    config_file.write_text("batch_size: 25\np_value_threshold: 0.01\n", encoding="utf-8")
    settings = load_config(config_file, BATCH_SIZE=10, P_VALUE_THRESHOLD=None)
    assert settings.BATCH_SIZE == 10
    assert settings.P_VALUE_THRESHOLD == 0.01


@pytest.mark.parametrize(
    "overrides",
    [{"BATCH_SIZE": 0}, {"P_VALUE_THRESHOLD": 1.5}, {"MIN_RANGE_RATIO": -1}, {"LOG_LEVEL": "loud"}],
)
def test_invalid_values_raise_value_error(overrides):
    with pytest.raises(ValueError):
        load_config(**overrides)


def test_yaml_must_be_a_mapping(tmp_path: Path):
    config_file = tmp_path / "benford.yaml"
    config_file.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(config_file)


def test_missing_yaml_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")
