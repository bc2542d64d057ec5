"""
======================== ÍNDICE / INDEX ========================
1. Descripción general / Overview
2. Componentes principales / Main components
3. Notas de mantenimiento / Maintenance notes

======================== ESPAÑOL ========================
Archivo: `src/benford_engine/core/models.py`.
Modelos de datos compartidos por el extractor, el acumulador y el análisis
chi-cuadrado.

Componentes detectados:
  - Verdict
  - AnalysisMode
  - DigitHistogram
  - AnalysisResult

Notas:
- Los modelos son inmutables; el acumulador es el único que muta conteos,
  y lo hace sobre su propia lista privada.

======================== ENGLISH ========================
File: `src/benford_engine/core/models.py`.
Data models shared by the extractor, the accumulator and the chi-square
analysis.

Detected components:
  - Verdict
  - AnalysisMode
  - DigitHistogram
  - AnalysisResult

Notes:
- Models are immutable; only the accumulator mutates counts, and it does so
  on its own private list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

HISTOGRAM_SIZE = 10


class Verdict(str, Enum):
    """Veredicto final de una corrida.

    English: Final verdict of a run.
    """

    INSUFFICIENT_DATA = "insufficient_data"
    NOT_APPLICABLE = "not_applicable"
    ANOMALOUS = "anomalous"
    CONSISTENT = "consistent"


class AnalysisMode(str, Enum):
    """Procedencia de los tokens; solo la usa la capa de presentación.

    English: Token provenance; only the presentation layer reads it.
    """

    TEXT = "text"
    RAW = "raw"
    PIXEL = "pixel"


@dataclass(frozen=True)
class DigitHistogram:
    """Histograma de 10 posiciones de primeros dígitos.

    Attributes:
        counts (Tuple[int, ...]): Posición 0 = tokens sin dígito inicial,
            posiciones 1-9 = conteo de cada dígito.

    English:
        10-bucket first-digit histogram.

    Attributes:
        counts (Tuple[int, ...]): Bucket 0 = tokens with no leading digit,
            buckets 1-9 = count per digit.
    """

    counts: Tuple[int, ...] = field(default=(0,) * HISTOGRAM_SIZE)

    def __post_init__(self) -> None:
        if len(self.counts) != HISTOGRAM_SIZE:
            raise ValueError(f"histogram needs {HISTOGRAM_SIZE} buckets, got {len(self.counts)}")
        if any(count < 0 for count in self.counts):
            raise ValueError("histogram counts must be non-negative")

    @classmethod
    def zeros(cls) -> "DigitHistogram":
        return cls()

    @classmethod
    def from_counts(cls, counts: Iterable[int]) -> "DigitHistogram":
        return cls(tuple(int(count) for count in counts))

    @property
    def excluded(self) -> int:
        """Tokens sin dígito inicial. / Tokens without a leading digit."""
        return self.counts[0]

    @property
    def valid_total(self) -> int:
        return sum(self.counts[1:])

    @property
    def total(self) -> int:
        return sum(self.counts)

    def digit_counts(self) -> List[int]:
        return list(self.counts[1:])

    def percentages(self) -> List[float]:
        """Porcentaje de cada dígito 1-9 sobre el total válido.

        English: Share of each digit 1-9 over the valid total, 0.0 when empty.
        """
        valid = self.valid_total
        if valid == 0:
            return [0.0] * (HISTOGRAM_SIZE - 1)
        return [count * 100.0 / valid for count in self.counts[1:]]

    def as_list(self) -> List[int]:
        return list(self.counts)


@dataclass(frozen=True)
class AnalysisResult:
    """Resultado terminal e inmutable de una corrida.

    Attributes:
        verdict (Verdict): Clasificación final.
        sample_compliant (bool): Resultado de la verificación de aplicabilidad.
        histogram (DigitHistogram): Histograma final usado en el cálculo.
        total_valid_count (int): Tokens con dígito inicial 1-9.
        chi_square_statistic (Optional[float]): None si no se calculó.
        p_value (Optional[float]): None si no se calculó.
        p_threshold (float): Umbral de significancia aplicado.

    English:
        Terminal, immutable result of a run. Statistic and p-value are None
        for INSUFFICIENT_DATA and NOT_APPLICABLE.
    """

    verdict: Verdict
    sample_compliant: bool
    histogram: DigitHistogram
    total_valid_count: int
    chi_square_statistic: Optional[float] = None
    p_value: Optional[float] = None
    p_threshold: float = 0.05

    @property
    def is_anomalous(self) -> bool:
        return self.verdict is Verdict.ANOMALOUS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "verdict": self.verdict.value,
            "sample_compliant": self.sample_compliant,
            "chi_square_statistic": self.chi_square_statistic,
            "p_value": self.p_value,
            "p_threshold": self.p_threshold,
            "total_valid_count": self.total_valid_count,
            "excluded_count": self.histogram.excluded,
            "histogram": self.histogram.as_list(),
        }
