"""Catálogo de mensajes por (veredicto, modo).

English:
    Message catalog keyed by (verdict, mode). The statistical core never
    produces prose; these texts are picked by the presentation layer.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from benford_engine.core.models import AnalysisMode, AnalysisResult, Verdict

HEADLINES: Dict[Verdict, str] = {
    Verdict.INSUFFICIENT_DATA: (
        "Insufficient numbers for analysis (need at least {min_samples} valid numbers)."
    ),
    Verdict.NOT_APPLICABLE: (
        "Warning: The numbers may not be suitable for Benford's Law "
        "(e.g., too uniform or constrained). Results may be unreliable."
    ),
    Verdict.ANOMALOUS: (
        "Potential Anomaly: The first-digit distribution deviates significantly "
        "from Benford's Law (chi-squared p-value: {p_value:.4f})."
    ),
    Verdict.CONSISTENT: (
        "Consistent with Benford's Law: The first-digit distribution aligns with "
        "expected patterns (chi-squared p-value: {p_value:.4f})."
    ),
}

MODE_NOTES: Dict[Tuple[Verdict, AnalysisMode], str] = {
    (Verdict.INSUFFICIENT_DATA, AnalysisMode.TEXT): "Check image quality or try a different file.",
    (Verdict.INSUFFICIENT_DATA, AnalysisMode.RAW): "Ensure the image is a JPEG.",
    (Verdict.INSUFFICIENT_DATA, AnalysisMode.PIXEL): "Try a different image.",
    (Verdict.NOT_APPLICABLE, AnalysisMode.PIXEL): (
        "Note: Pixel value analysis is experimental. Pixel RGB values (0-255) may not "
        "follow Benford's Law in natural images, and deviations may reflect content "
        "rather than manipulation."
    ),
    (Verdict.ANOMALOUS, AnalysisMode.TEXT): (
        "This may suggest data manipulation, but could result from OCR errors."
    ),
    (Verdict.ANOMALOUS, AnalysisMode.RAW): "This may indicate a synthetic image.",
    (Verdict.ANOMALOUS, AnalysisMode.PIXEL): (
        "This may indicate unusual pixel distributions, but pixel values may not "
        "reliably follow Benford's Law."
    ),
    (Verdict.CONSISTENT, AnalysisMode.TEXT): (
        "This suggests natural data, but does not guarantee authenticity."
    ),
    (Verdict.CONSISTENT, AnalysisMode.RAW): (
        "This suggests a natural image, but does not guarantee authenticity."
    ),
    (Verdict.CONSISTENT, AnalysisMode.PIXEL): (
        "This suggests typical pixel distributions, but pixel analysis is experimental "
        "and may not indicate authenticity."
    ),
}

FOLLOW_UPS: Dict[Verdict, str] = {
    Verdict.ANOMALOUS: "Verify the source and consider further forensic analysis.",
    Verdict.CONSISTENT: "For critical cases, perform additional checks.",
}


def mode_note(verdict: Verdict, mode: AnalysisMode) -> Optional[str]:
    return MODE_NOTES.get((verdict, mode))


def explain(result: AnalysisResult, mode: AnalysisMode, *, min_samples: int = 100) -> str:
    """Arma el texto explicativo para un resultado.

    English: Build the explanatory text for a result.
    """
    parts = [HEADLINES[result.verdict].format(min_samples=min_samples, p_value=result.p_value or 0.0)]
    note = mode_note(result.verdict, mode)
    if note:
        parts.append(note)
    follow_up = FOLLOW_UPS.get(result.verdict)
    if follow_up:
        parts.append(follow_up)
    return " ".join(parts)
