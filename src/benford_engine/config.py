"""Configuración validada del motor Benford.

English: Validated Benford engine configuration.

Precedencia / precedence: argumentos explícitos > archivo YAML > variables de
entorno (prefijo ``BENFORD_``) > ``.env`` > valores por defecto.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import yaml
from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from benford_engine.core.models import AnalysisMode

_ENV_PATH = Path(".env")
load_dotenv(_ENV_PATH, override=False)

logger = structlog.get_logger(__name__)


class BenfordSettings(BaseSettings):
    """Parámetros de una corrida de análisis.

    English: Parameters for an analysis run.
    """

    model_config = SettingsConfigDict(
        env_prefix="BENFORD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    BATCH_SIZE: int = Field(default=100, ge=1)
    P_VALUE_THRESHOLD: float = Field(default=0.05, gt=0.0, lt=1.0)
    MIN_SAMPLES: int = Field(default=100, ge=1)
    MIN_RANGE_RATIO: float = Field(default=100.0, gt=0.0)
    ANALYSIS_MODE: AnalysisMode = AnalysisMode.TEXT
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[Path] = None

    @field_validator("LOG_LEVEL")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        """Acepta solo niveles de logging conocidos. / Accept known logging levels only."""
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


def _load_yaml_overrides(path: Path) -> Dict[str, Any]:
    """Carga un mapa YAML o lanza un error orientado al usuario.

    English: Load a YAML mapping or raise a user-facing error.
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing config file {path.as_posix()}")
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"{path.name} has YAML syntax errors") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name} must be a YAML mapping")
    return {str(key).upper(): value for key, value in raw.items()}


def load_config(path: Optional[Path] = None, **overrides: Any) -> BenfordSettings:
    """Carga y valida configuración, fallando con detalle.

    English: Load and validate configuration, failing with details.
    """
    values: Dict[str, Any] = {}
    if path is not None:
        values.update(_load_yaml_overrides(Path(path)))
    values.update({key.upper(): value for key, value in overrides.items() if value is not None})
    try:
        settings = BenfordSettings(**values)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
    logger.debug("config_loaded", batch_size=settings.BATCH_SIZE, p_threshold=settings.P_VALUE_THRESHOLD)
    return settings
