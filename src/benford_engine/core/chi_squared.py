"""Prueba chi-cuadrado de bondad de ajuste contra Benford.

English: Chi-square goodness-of-fit test against Benford.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
import structlog
from scipy import stats

from benford_engine.core.applicability import DEFAULT_MIN_SAMPLES
from benford_engine.core.digits import expected_counts
from benford_engine.core.models import AnalysisResult, DigitHistogram, Verdict
from benford_engine.errors import ChiSquaredComputationError

DEGREES_OF_FREEDOM = 8
DEFAULT_P_THRESHOLD = 0.05

logger = structlog.get_logger(__name__)


def chi_square_statistic(histogram: DigitHistogram, total_valid_count: int) -> float:
    """Suma de (observado - esperado)^2 / esperado sobre los dígitos 1-9.

    English: Sum of (observed - expected)^2 / expected over digits 1-9.
    """
    observed = np.array(histogram.digit_counts(), dtype=float)
    expected = expected_counts(total_valid_count)
    if np.any(expected <= 0):
        raise ChiSquaredComputationError(
            f"expected counts must be positive (total_valid_count={total_valid_count})"
        )
    return float(np.sum((observed - expected) ** 2 / expected))


def p_value_for(statistic: float) -> float:
    """Cola superior de chi-cuadrado con 8 grados de libertad.

    English: Upper tail of the chi-square distribution with 8 dof.
    """
    if not math.isfinite(statistic) or statistic < 0:
        raise ChiSquaredComputationError(f"invalid chi-square statistic: {statistic!r}")
    try:
        p_value = float(stats.chi2.sf(statistic, DEGREES_OF_FREEDOM))
    except (ArithmeticError, ValueError) as exc:
        raise ChiSquaredComputationError(f"chi-square CDF failed for {statistic!r}") from exc
    if not math.isfinite(p_value) or not 0.0 <= p_value <= 1.0:
        raise ChiSquaredComputationError(f"chi-square CDF returned {p_value!r} for {statistic!r}")
    return p_value


def analyze(
    histogram: DigitHistogram,
    total_valid_count: Optional[int] = None,
    *,
    applicable: bool = True,
    p_threshold: float = DEFAULT_P_THRESHOLD,
    min_samples: int = DEFAULT_MIN_SAMPLES,
) -> AnalysisResult:
    """Clasifica un histograma completo.

    Orden de evaluación:

    1. Menos de ``min_samples`` valores válidos: INSUFFICIENT_DATA.
    2. Conjunto no aplicable: NOT_APPLICABLE (se conserva el histograma).
    3. Estadístico chi-cuadrado y p-value con 8 grados de libertad.
    4. ANOMALOUS si p < ``p_threshold``; CONSISTENT en otro caso.

    Un fallo numérico lanza ``ChiSquaredComputationError``; nunca se asume un
    veredicto por defecto.

    English:
        Classify a completed histogram.

        Evaluation order: insufficient sample, then applicability, then the
        chi-square statistic and its p-value, then thresholding. A numerical
        fault raises ``ChiSquaredComputationError`` instead of defaulting to
        a verdict.
    """
    if total_valid_count is None:
        total_valid_count = histogram.valid_total

    if total_valid_count < min_samples:
        logger.info("analysis_insufficient_data", valid=total_valid_count, min_samples=min_samples)
        return AnalysisResult(
            verdict=Verdict.INSUFFICIENT_DATA,
            sample_compliant=applicable,
            histogram=histogram,
            total_valid_count=total_valid_count,
            p_threshold=p_threshold,
        )

    if not applicable:
        logger.info("analysis_not_applicable", valid=total_valid_count)
        return AnalysisResult(
            verdict=Verdict.NOT_APPLICABLE,
            sample_compliant=False,
            histogram=histogram,
            total_valid_count=total_valid_count,
            p_threshold=p_threshold,
        )

    statistic = chi_square_statistic(histogram, total_valid_count)
    p_value = p_value_for(statistic)
    verdict = Verdict.ANOMALOUS if p_value < p_threshold else Verdict.CONSISTENT
    logger.info(
        "analysis_complete",
        verdict=verdict.value,
        chi2=statistic,
        p_value=p_value,
        valid=total_valid_count,
    )
    return AnalysisResult(
        verdict=verdict,
        sample_compliant=True,
        histogram=histogram,
        total_valid_count=total_valid_count,
        chi_square_statistic=statistic,
        p_value=p_value,
        p_threshold=p_threshold,
    )
