# --------------------------------------------------------------
# File: __init__.py
# Description: Capa de servicios del sobre híbrido.
# --------------------------------------------------------------
"""Orquestación del cifrado híbrido y persistencia de claves."""

__all__ = ["keygen", "services"]
