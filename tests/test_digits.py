"""Pruebas de extracción del primer dígito.

Tests for first-digit extraction.
"""

import math

import pytest

from benford_engine.core.digits import (
    BENFORD_PERCENTAGES,
    expected_counts,
    expected_proportions,
    first_digit,
)


@pytest.mark.parametrize(
    ("token", "digit"),
    [
        ("123.4", 1),
        ("0.00456", 4),
        ("-250", 2),
        ("0007", 7),
        ("9", 9),
        (812, 8),
        (0.031, 3),
        (1e-05, 1),
        (4.5e20, 4),
    ],
)
def test_first_digit_examples(token, digit):
    """Español: Función test_first_digit_examples del módulo tests/test_digits.py.

    English: Function test_first_digit_examples defined in tests/test_digits.py.
    """
    assert first_digit(token) == digit


@pytest.mark.parametrize("token", ["", "0", "0.000", "000", "abc", "-", ".", None, float("nan"), 0])
def test_first_digit_returns_sentinel_without_leading_digit(token):
    """Español: Tokens sin dígito 1-9 devuelven 0.

    English: Tokens with no 1-9 digit map to 0.
    """
    assert first_digit(token) == 0


def test_first_digit_is_total_for_broken_str():
    """Español: Un __str__ que falla no rompe la extracción.

    English: A failing __str__ does not break extraction.
    """

    class Broken:
        def __str__(self):
            raise RuntimeError("boom")

    assert first_digit(Broken()) == 0


def test_first_digit_scans_past_non_digits():
    assert first_digit("abc5") == 5
    assert first_digit("$ 3,200") == 3


def test_benford_percentages_sum_to_hundred():
    assert len(BENFORD_PERCENTAGES) == 9
    assert math.isclose(sum(BENFORD_PERCENTAGES), 100.0, abs_tol=1e-9)
    exact = [100 * math.log10(1 + 1 / d) for d in range(1, 10)]
    for rounded, precise in zip(BENFORD_PERCENTAGES, exact):
        assert abs(rounded - precise) < 0.06


def test_expected_counts_scale_with_total():
    counts = expected_counts(1000)
    assert counts.shape == (9,)
    assert counts[0] == pytest.approx(301.0)
    assert counts.sum() == pytest.approx(1000.0)
    assert expected_proportions().sum() == pytest.approx(1.0)


@pytest.mark.parametrize(
    ("token", "digit"),
    [
        (10**5000, 1),
        (7 * 10**4400, 7),
        (-(3 * 10**6000 + 12345), 3),
        (10**15 - 1, 9),
    ],
    ids=["1e5000", "7e4400", "neg-3e6000", "1e15-1"],
)
def test_first_digit_of_huge_integers(token, digit):
    """Español: Enteros más allá del límite de str() conservan su dígito.

    English: Integers past the int-to-str digit limit keep their digit.
    """
    assert first_digit(token) == digit


def test_first_digit_of_integers_matches_text_scan():
    for value in [1, 9, 10, 99, 100, 12345, 987654321, -42, 2**64, 10**30 - 1]:
        assert first_digit(value) == first_digit(str(value))


def test_booleans_have_no_leading_digit():
    assert first_digit(True) == 0
    assert first_digit(False) == 0
