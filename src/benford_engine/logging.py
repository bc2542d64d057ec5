"""Configuración de structlog para el motor Benford.

English: structlog configuration for the Benford engine.
"""

from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, List, Optional

import structlog


def setup_logging(log_level: str = "INFO", log_dir: Optional[Path] = None) -> structlog.BoundLogger:
    """Configura structlog y handlers de consola/archivo.

    English: Configure structlog and console/file handlers. The file handler
    is only installed when ``log_dir`` is given.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            TimedRotatingFileHandler(
                log_dir / "benford.log",
                when="midnight",
                backupCount=30,
                encoding="utf-8",
            )
        )

    logging.basicConfig(
        level=log_level.upper(),
        handlers=handlers,
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(log_level.upper())),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger()


def bind_context(
    logger: structlog.BoundLogger,
    run_id: Optional[str] = None,
    mode: Optional[str] = None,
    source: Optional[str] = None,
) -> structlog.BoundLogger:
    """Adjunta contexto estándar al logger.

    English: Bind standard run context to the logger.
    """
    context: dict[str, Any] = {}
    if run_id:
        context["run_id"] = run_id
    if mode:
        context["mode"] = mode
    if source:
        context["source"] = source
    return logger.bind(**context)
