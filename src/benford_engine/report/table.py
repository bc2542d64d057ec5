"""Tabla de resultados en texto plano.

English: Plain-text results table.
"""

from __future__ import annotations

from typing import List

from benford_engine.core.digits import BENFORD_PERCENTAGES
from benford_engine.core.models import DigitHistogram


def render_table(histogram: DigitHistogram) -> str:
    """Dígito, conteo, porcentaje observado y esperado, más el total.

    English:
        Digit, count, observed and expected percentage, plus the total row.
        Excluded tokens are reported above the table and left out of the
        percentages.
    """
    lines: List[str] = []
    if histogram.excluded > 0:
        lines.append(f"Excluding {histogram.excluded} invalid numbers")
    lines.append(f"{'Digit':>5}  {'Count':>8}  {'Percent':>8}  {'Benford':>8}")
    for digit, (count, percent) in enumerate(
        zip(histogram.digit_counts(), histogram.percentages()), start=1
    ):
        expected = BENFORD_PERCENTAGES[digit - 1]
        lines.append(f"{digit:>5}  {count:>8}  {percent:>7.2f}%  {expected:>7.1f}%")
    lines.append(f"{'Total':>5}  {histogram.valid_total:>8}  {100.0:>7.2f}%  {100.0:>7.1f}%")
    return "\n".join(lines)
