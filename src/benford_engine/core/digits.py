"""Extracción del primer dígito y distribución esperada de Benford.

English: First-digit extraction and Benford's expected distribution.
"""

from __future__ import annotations

import math
from typing import Any, Tuple

import numpy as np

# Porcentajes canónicos de Benford para dígitos 1-9; suman 100.
# Canonical Benford percentages for digits 1-9, rounded from log10(1 + 1/d).
BENFORD_PERCENTAGES: Tuple[float, ...] = (30.1, 17.6, 12.5, 9.7, 7.9, 6.7, 5.8, 5.1, 4.6)

NO_LEADING_DIGIT = 0


def first_digit(token: Any) -> int:
    """Devuelve el primer dígito significativo (1-9) o 0 si no existe.

    Se quitan los ceros iniciales y se recorre el texto de izquierda a
    derecha; el primer carácter entre '1' y '9' es el dígito. El signo y el
    punto decimal se ignoran. Nunca lanza excepciones.

    English:
        Return the leading significant digit (1-9), or 0 when there is none.

        Leading zeros are stripped and the text is scanned left to right; the
        first character in '1'..'9' is the digit. Sign and decimal point are
        skipped. Never raises.

    Examples:
        "0.00456" -> 4
        "-250" -> 2
        "0.000" -> 0
        "abc" -> 0
    """
    if isinstance(token, str):
        text = token
    elif isinstance(token, int) and not isinstance(token, bool):
        return _leading_digit_of_int(token)
    else:
        try:
            text = str(token)
        except Exception:  # noqa: BLE001
            return NO_LEADING_DIGIT
    for char in text.lstrip("0"):
        if "1" <= char <= "9":
            return int(char)
    return NO_LEADING_DIGIT


def _leading_digit_of_int(value: int) -> int:
    """Primer dígito por aritmética; no depende del límite de str() para int.

    English: Leading digit computed arithmetically, so integers past the
    int-to-str digit limit keep their digit.
    """
    value = abs(value)
    if value == 0:
        return NO_LEADING_DIGIT
    shift = int(value.bit_length() * math.log10(2)) - 2
    if shift > 0:
        value //= 10 ** shift
    while value >= 10:
        value //= 10
    return value


def expected_proportions() -> np.ndarray:
    """Proporciones esperadas para dígitos 1-9.

    English: Expected proportions for digits 1-9.
    """
    return np.array(BENFORD_PERCENTAGES, dtype=float) / 100.0


def expected_counts(total_valid_count: int) -> np.ndarray:
    """Conteos esperados de Benford para un total dado.

    English: Expected Benford counts for a given total.
    """
    return expected_proportions() * float(total_valid_count)
