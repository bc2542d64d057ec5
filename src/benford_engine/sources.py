"""Extracción de tokens numéricos desde texto plano.

English: Numeric token extraction from plain text.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

_NUMBER = re.compile(r"\b\d+\.?\d*\b")


def extract_numbers(text: str) -> List[str]:
    """Devuelve los números del texto, en orden, como cadenas.

    English: Return the numbers found in the text, in order, as strings.
    """
    return _NUMBER.findall(text)


def read_text_tokens(path: Path) -> List[str]:
    return extract_numbers(path.read_text(encoding="utf-8", errors="replace"))
