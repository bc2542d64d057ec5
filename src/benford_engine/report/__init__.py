"""Capa de presentación: catálogo de mensajes y tablas.

English: Presentation layer: message catalog and tables.
"""

from benford_engine.report.messages import explain, mode_note
from benford_engine.report.table import render_table

__all__ = ["explain", "mode_note", "render_table"]
