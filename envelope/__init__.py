# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de las primitivas del sobre híbrido.
# --------------------------------------------------------------
"""Inicializa el paquete `envelope` y documenta sus módulos principales."""

__all__ = [
    "codec",
    "config",
    "crypto_asym",
    "crypto_hash",
    "crypto_sym",
    "errors",
    "models",
]
