"""Errores del motor Benford.

English: Benford engine errors.
"""

from __future__ import annotations


class BenfordError(Exception):
    """Base para errores del motor.

    English: Base class for engine errors.
    """


class ChiSquaredComputationError(BenfordError):
    """Fallo numérico al calcular chi-cuadrado o su p-value.

    English: Numerical failure while computing chi-square or its p-value.
    The run is aborted; no verdict is produced.
    """


class AnalysisCancelled(BenfordError):
    """La corrida fue cancelada en un límite de lote.

    English: The run was cancelled at a batch boundary.
    """

    def __init__(self, processed: int, total: int) -> None:
        super().__init__(f"Analysis cancelled after {processed} of {total} tokens")
        self.processed = processed
        self.total = total
