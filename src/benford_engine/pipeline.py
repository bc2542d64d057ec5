"""Orquestación de una corrida completa de análisis Benford.

English:
    Orchestration of a complete Benford analysis run: accumulation, then
    applicability and chi-square, then delivery to the reporter.
"""

from __future__ import annotations

import uuid
from concurrent.futures import Future
from typing import Any, Iterable, List, Optional

import structlog

from benford_engine.config import BenfordSettings, load_config
from benford_engine.core.accumulator import (
    CancellationToken,
    HistogramAccumulator,
    Scheduler,
    accumulate_async,
)
from benford_engine.core.applicability import is_applicable
from benford_engine.core.chi_squared import analyze
from benford_engine.core.models import AnalysisMode, AnalysisResult, DigitHistogram
from benford_engine.logging import bind_context
from benford_engine.reporting import CollectingReporter, ResultReporter

logger = structlog.get_logger(__name__)


def evaluate(histogram: DigitHistogram, tokens: List[Any], settings: BenfordSettings) -> AnalysisResult:
    """Aplica aplicabilidad y chi-cuadrado sobre un histograma terminado.

    English: Run applicability and chi-square over a finished histogram.
    """
    applicable = is_applicable(
        tokens,
        min_samples=settings.MIN_SAMPLES,
        min_range_ratio=settings.MIN_RANGE_RATIO,
    )
    return analyze(
        histogram,
        histogram.valid_total,
        applicable=applicable,
        p_threshold=settings.P_VALUE_THRESHOLD,
        min_samples=settings.MIN_SAMPLES,
    )


def run_analysis(
    tokens: Iterable[Any],
    reporter: ResultReporter,
    *,
    settings: Optional[BenfordSettings] = None,
    mode: Optional[AnalysisMode] = None,
    scheduler: Optional[Scheduler] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> "Future[AnalysisResult]":
    """Inicia una corrida y entrega sus eventos a ``reporter``.

    Devuelve un ``Future`` con el resultado o el error fatal. Con el
    planificador inmediato (por defecto) la corrida termina antes de retornar
    y los errores fatales, ya entregados a ``reporter.on_error``, se relanzan.
    Con un planificador asíncrono el ``Future`` se espera con
    ``asyncio.wrap_future``.

    English:
        Start a run and deliver its events to ``reporter``.

        Returns a ``Future`` holding the result or the fatal error. With the
        default immediate scheduler the run finishes before this returns and
        fatal errors, already delivered to ``reporter.on_error``, are
        re-raised. With an asynchronous scheduler await the ``Future`` through
        ``asyncio.wrap_future``.
    """
    settings = settings or load_config()
    token_list = list(tokens)
    run_log = bind_context(
        logger,
        run_id=uuid.uuid4().hex[:12],
        mode=(mode or settings.ANALYSIS_MODE).value,
    )
    run_log.info("analysis_start", tokens=len(token_list), batch_size=settings.BATCH_SIZE)
    outcome: Future[AnalysisResult] = Future()

    accumulator = HistogramAccumulator(
        token_list,
        batch_size=settings.BATCH_SIZE,
        scheduler=scheduler,
        cancel_token=cancel_token,
    )

    def on_progress(histogram: DigitHistogram, progress: float) -> None:
        reporter.on_histogram(histogram)
        reporter.on_progress(progress)

    def on_complete(histogram: DigitHistogram) -> None:
        result = evaluate(histogram, token_list, settings)
        run_log.info("analysis_finished", verdict=result.verdict.value, excluded=histogram.excluded)
        reporter.on_result(result)
        outcome.set_result(result)

    def on_error(exc: BaseException) -> None:
        run_log.error("analysis_aborted", error=str(exc), error_type=type(exc).__name__)
        if not outcome.done():
            outcome.set_exception(exc)
        reporter.on_error(exc)

    accumulator.process_all(on_progress, on_complete, on_error)
    if outcome.done():
        outcome.result()
    return outcome


def analyze_tokens(
    tokens: Iterable[Any],
    *,
    settings: Optional[BenfordSettings] = None,
    reporter: Optional[ResultReporter] = None,
    mode: Optional[AnalysisMode] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> AnalysisResult:
    """Corrida síncrona que devuelve el resultado.

    English: Synchronous run returning the result.
    """
    sink: ResultReporter = reporter if reporter is not None else CollectingReporter()
    return run_analysis(tokens, sink, settings=settings, mode=mode, cancel_token=cancel_token).result()


async def analyze_tokens_async(
    tokens: Iterable[Any],
    *,
    settings: Optional[BenfordSettings] = None,
    reporter: Optional[ResultReporter] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> AnalysisResult:
    """Corrida cooperativa para asyncio; cede el loop entre lotes.

    English: Cooperative asyncio run; yields the loop between batches.
    """
    settings = settings or load_config()
    token_list = list(tokens)

    def on_progress(histogram: DigitHistogram, progress: float) -> None:
        if reporter is not None:
            reporter.on_histogram(histogram)
            reporter.on_progress(progress)

    try:
        histogram = await accumulate_async(
            token_list,
            batch_size=settings.BATCH_SIZE,
            on_progress=on_progress,
            cancel_token=cancel_token,
        )
        result = evaluate(histogram, token_list, settings)
    except Exception as exc:
        logger.error("analysis_aborted", error=str(exc), error_type=type(exc).__name__)
        if reporter is not None:
            reporter.on_error(exc)
        raise
    if reporter is not None:
        reporter.on_result(result)
    return result
