"""Verificación de aplicabilidad de la Ley de Benford.

English: Benford's Law applicability check.

Un conjunto es candidato solo si tiene suficientes valores y abarca varios
órdenes de magnitud. A dataset qualifies only with enough values spanning
several orders of magnitude.
"""

from __future__ import annotations

import math
import re
from typing import Any, Iterable, List

import structlog

DEFAULT_MIN_SAMPLES = 100
DEFAULT_MIN_RANGE_RATIO = 100.0

_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

logger = structlog.get_logger(__name__)


def parse_float(token: Any) -> float:
    """Convierte un token a float tomando el prefijo numérico más largo.

    English:
        Convert a token to float using its longest numeric prefix
        ("12abc" -> 12.0). Returns NaN when no prefix parses.
    """
    if isinstance(token, bool):
        return math.nan
    if isinstance(token, (int, float)):
        try:
            return float(token)
        except OverflowError:
            return math.inf if token > 0 else -math.inf
    try:
        text = str(token)
    except Exception:  # noqa: BLE001
        return math.nan
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        stripped = text.strip().lower()
        if stripped in {"infinity", "+infinity"}:
            return math.inf
        if stripped == "-infinity":
            return -math.inf
        return math.nan
    return float(match.group(1))


def valid_values(values: Iterable[Any]) -> List[float]:
    """Valores parseables (no NaN) en orden de entrada.

    English: Parseable (non-NaN) values in input order.
    """
    parsed = (parse_float(value) for value in values)
    return [value for value in parsed if not math.isnan(value)]


def is_applicable(
    values: Iterable[Any],
    *,
    min_samples: int = DEFAULT_MIN_SAMPLES,
    min_range_ratio: float = DEFAULT_MIN_RANGE_RATIO,
) -> bool:
    """Decide si el conjunto es elegible para un análisis Benford.

    Falla con menos de ``min_samples`` valores válidos, con mínimo <= 0, o
    cuando max/min <= ``min_range_ratio`` o no está definido.

    English:
        Decide whether the dataset is eligible for Benford analysis.

        Fails with fewer than ``min_samples`` valid values, a minimum <= 0,
        or max/min <= ``min_range_ratio``. An undefined ratio (every value
        infinite) also fails.
    """
    parsed = valid_values(values)
    if len(parsed) < min_samples:
        logger.debug("applicability_rejected", reason="sample_size", valid=len(parsed))
        return False
    low = min(parsed)
    high = max(parsed)
    if low <= 0:
        logger.debug("applicability_rejected", reason="non_positive_minimum", minimum=low)
        return False
    ratio = high / low
    if not ratio > min_range_ratio:
        logger.debug("applicability_rejected", reason="narrow_range", ratio=ratio)
        return False
    return True
