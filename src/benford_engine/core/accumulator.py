"""Acumulador incremental del histograma de primeros dígitos.

English:
    Incremental first-digit histogram accumulator.

El acumulador procesa los tokens en lotes consecutivos y entrega el control
al planificador entre lotes. The accumulator processes tokens in consecutive
batches and hands control back to the scheduler between batches, so callers
choose between an eager loop (CLI, server) and cooperative interleaving
(asyncio).
"""

from __future__ import annotations

import asyncio
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable, Deque, Iterable, List, Optional, Protocol, Sequence

import structlog

from benford_engine.core.digits import first_digit
from benford_engine.core.models import HISTOGRAM_SIZE, DigitHistogram
from benford_engine.errors import AnalysisCancelled

DEFAULT_BATCH_SIZE = 100

ProgressCallback = Callable[[DigitHistogram, float], None]
CompleteCallback = Callable[[DigitHistogram], None]
ErrorCallback = Callable[[BaseException], None]

logger = structlog.get_logger(__name__)


class Scheduler(Protocol):
    """Planificador que ejecuta la continuación del siguiente lote.

    English: Scheduler that runs the continuation for the next batch.
    """

    def submit(self, callback: Callable[[], None]) -> None:
        ...


class ImmediateScheduler:
    """Ejecuta todos los lotes de inmediato, sin recursión.

    English:
        Runs every batch right away. Continuations submitted while a callback
        is running are queued and drained by the outermost ``submit`` call,
        so long inputs do not grow the call stack.
    """

    def __init__(self) -> None:
        self._pending: Deque[Callable[[], None]] = deque()
        self._draining = False

    def submit(self, callback: Callable[[], None]) -> None:
        self._pending.append(callback)
        if self._draining:
            return
        self._draining = True
        try:
            while self._pending:
                self._pending.popleft()()
        finally:
            self._draining = False
            self._pending.clear()


class AsyncioScheduler:
    """Agenda cada lote como un turno del event loop de asyncio.

    English: Schedules each batch as one turn of an asyncio event loop.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def submit(self, callback: Callable[[], None]) -> None:
        loop = self._loop or asyncio.get_running_loop()
        loop.call_soon(callback)


class CancellationToken:
    """Señal de cancelación revisada en cada límite de lote.

    English: Cancellation signal checked at every batch boundary.
    """

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class HistogramAccumulator:
    """Fold por lotes de tokens hacia un histograma de 10 posiciones.

    Cada instancia es dueña exclusiva de su cursor y de su histograma; dos
    corridas concurrentes deben usar instancias distintas.

    English:
        Batched fold of tokens into a 10-bucket histogram.

        Each instance exclusively owns its cursor and histogram; concurrent
        runs must use separate instances. The final histogram does not depend
        on ``batch_size``, which only controls how often progress is reported
        and how much work happens per scheduling turn.
    """

    def __init__(
        self,
        tokens: Iterable[Any],
        *,
        batch_size: int = DEFAULT_BATCH_SIZE,
        scheduler: Optional[Scheduler] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> None:
        if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size < 1:
            raise ValueError(f"batch_size must be a positive integer, got {batch_size!r}")
        self._tokens: Sequence[Any] = tokens if isinstance(tokens, (list, tuple)) else list(tokens)
        self.batch_size = batch_size
        self.scheduler: Scheduler = scheduler or ImmediateScheduler()
        self.cancel_token = cancel_token
        self._counts: List[int] = [0] * HISTOGRAM_SIZE
        self._index = 0
        self._started = False
        self._done = False

    @property
    def total(self) -> int:
        return len(self._tokens)

    @property
    def index(self) -> int:
        return self._index

    @property
    def done(self) -> bool:
        return self._done

    @property
    def progress(self) -> float:
        if not self._tokens:
            return 100.0 if self._done else 0.0
        return self._index / len(self._tokens) * 100

    def snapshot(self) -> DigitHistogram:
        return DigitHistogram.from_counts(self._counts)

    def _check_cancelled(self) -> None:
        if self.cancel_token is not None and self.cancel_token.cancelled:
            logger.info("accumulator_cancelled", processed=self._index, total=self.total)
            raise AnalysisCancelled(self._index, self.total)

    def step(self, on_progress: Optional[ProgressCallback] = None) -> bool:
        """Procesa el siguiente lote y reporta progreso.

        English:
            Process the next batch, report progress, and return True while
            tokens remain.
        """
        if self._done:
            raise RuntimeError("accumulator already completed")
        self._check_cancelled()
        end = min(self._index + self.batch_size, len(self._tokens))
        for position in range(self._index, end):
            self._counts[first_digit(self._tokens[position])] += 1
        self._index = end
        remaining = self._index < len(self._tokens)
        if not remaining:
            self._done = True
        if on_progress is not None:
            on_progress(self.snapshot(), self.progress)
        return remaining

    def process_all(
        self,
        on_progress: ProgressCallback,
        on_complete: CompleteCallback,
        on_error: Optional[ErrorCallback] = None,
    ) -> "Future[DigitHistogram]":
        """Procesa todos los tokens, cediendo al planificador entre lotes.

        ``on_complete`` se invoca una sola vez, después del último progreso.
        Devuelve un ``Future`` que termina con el histograma final o con el
        error de la corrida; con planificadores asíncronos se espera con
        ``asyncio.wrap_future``. Si se pasa ``on_error``, la cancelación y los
        errores de los callbacks también se entregan ahí; de lo contrario,
        cuando la corrida ya terminó al retornar (planificador inmediato), el
        error se relanza.

        English:
            Process every token, yielding to the scheduler between batches.

            ``on_complete`` fires exactly once, after the last progress event.
            Returns a ``Future`` resolved with the final histogram or with the
            run's failure; with asynchronous schedulers await it through
            ``asyncio.wrap_future``. When ``on_error`` is given, cancellation
            and callback failures are also delivered there; otherwise, if the
            run already finished when this returns (immediate scheduler), the
            failure is re-raised.
        """
        if self._started:
            raise RuntimeError("accumulator runs are single-use; create a new instance")
        self._started = True
        logger.debug("accumulator_start", total=self.total, batch_size=self.batch_size)
        completion: Future[DigitHistogram] = Future()

        def turn() -> None:
            try:
                if self.step(on_progress):
                    self.scheduler.submit(turn)
                    return
                final = self.snapshot()
                logger.debug("accumulator_complete", total=self.total, excluded=final.excluded)
                on_complete(final)
                completion.set_result(final)
            except Exception as exc:
                logger.debug("accumulator_failed", processed=self._index, error_type=type(exc).__name__)
                if not completion.done():
                    completion.set_exception(exc)
                if on_error is not None:
                    on_error(exc)

        self.scheduler.submit(turn)
        if on_error is None and completion.done():
            failure = completion.exception()
            if failure is not None:
                raise failure
        return completion


async def accumulate_async(
    tokens: Iterable[Any],
    *,
    batch_size: int = DEFAULT_BATCH_SIZE,
    on_progress: Optional[ProgressCallback] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> DigitHistogram:
    """Variante asyncio: ``await asyncio.sleep(0)`` entre lotes.

    English: Asyncio variant that awaits ``asyncio.sleep(0)`` between batches.
    """
    accumulator = HistogramAccumulator(tokens, batch_size=batch_size, cancel_token=cancel_token)
    while accumulator.step(on_progress):
        await asyncio.sleep(0)
    return accumulator.snapshot()
