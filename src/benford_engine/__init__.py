"""Motor estadístico de la Ley de Benford.

English: Benford's Law statistical engine.
"""

from benford_engine.core.accumulator import (
    AsyncioScheduler,
    CancellationToken,
    HistogramAccumulator,
    ImmediateScheduler,
    accumulate_async,
)
from benford_engine.core.applicability import is_applicable
from benford_engine.core.chi_squared import analyze
from benford_engine.core.digits import BENFORD_PERCENTAGES, first_digit
from benford_engine.core.models import AnalysisMode, AnalysisResult, DigitHistogram, Verdict
from benford_engine.errors import AnalysisCancelled, BenfordError, ChiSquaredComputationError
from benford_engine.pipeline import analyze_tokens, analyze_tokens_async, run_analysis

__version__ = "0.1.0"

__all__ = [
    "AnalysisCancelled",
    "AnalysisMode",
    "AnalysisResult",
    "AsyncioScheduler",
    "BENFORD_PERCENTAGES",
    "BenfordError",
    "CancellationToken",
    "ChiSquaredComputationError",
    "DigitHistogram",
    "HistogramAccumulator",
    "ImmediateScheduler",
    "Verdict",
    "accumulate_async",
    "analyze",
    "analyze_tokens",
    "analyze_tokens_async",
    "first_digit",
    "is_applicable",
    "run_analysis",
]
