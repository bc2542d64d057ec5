"""Núcleo estadístico: extracción, aplicabilidad, acumulación y chi-cuadrado.

English: Statistical core: extraction, applicability, accumulation and chi-square.
"""
