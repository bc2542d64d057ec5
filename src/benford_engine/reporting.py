"""Contrato del receptor de resultados y receptores de referencia.

English:
    Result reporter contract and reference reporters.

El núcleo solo emite datos estructurados (histogramas, progreso, resultado);
la presentación queda del lado del receptor. The core only emits structured
data; presentation belongs to the reporter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

import structlog

from benford_engine.core.models import AnalysisResult, DigitHistogram


class ResultReporter(Protocol):
    """Receptor de eventos de una corrida. / Sink for the events of a run."""

    def on_histogram(self, histogram: DigitHistogram) -> None:
        ...

    def on_progress(self, progress: float) -> None:
        ...

    def on_result(self, result: AnalysisResult) -> None:
        ...

    def on_error(self, error: BaseException) -> None:
        ...


class LoggingReporter:
    """Registra cada evento como log estructurado.

    English: Logs every event as a structured record.
    """

    def __init__(self, logger: Optional[structlog.BoundLogger] = None) -> None:
        self.logger = logger or structlog.get_logger(__name__)

    def on_histogram(self, histogram: DigitHistogram) -> None:
        self.logger.debug("histogram_snapshot", counts=histogram.as_list())

    def on_progress(self, progress: float) -> None:
        self.logger.debug("analysis_progress", progress=round(progress, 1))

    def on_result(self, result: AnalysisResult) -> None:
        self.logger.info("analysis_result", **result.to_dict())

    def on_error(self, error: BaseException) -> None:
        self.logger.error("analysis_failed", error=str(error), error_type=type(error).__name__)


@dataclass
class CollectingReporter:
    """Guarda todos los eventos recibidos, en orden.

    English: Keeps every received event, in order.
    """

    histograms: List[DigitHistogram] = field(default_factory=list)
    progress: List[float] = field(default_factory=list)
    results: List[AnalysisResult] = field(default_factory=list)
    errors: List[BaseException] = field(default_factory=list)

    def on_histogram(self, histogram: DigitHistogram) -> None:
        self.histograms.append(histogram)

    def on_progress(self, progress: float) -> None:
        self.progress.append(progress)

    def on_result(self, result: AnalysisResult) -> None:
        self.results.append(result)

    def on_error(self, error: BaseException) -> None:
        self.errors.append(error)

    @property
    def result(self) -> Optional[AnalysisResult]:
        return self.results[-1] if self.results else None
