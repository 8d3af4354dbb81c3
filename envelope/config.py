# --------------------------------------------------------------
# File: config.py
# Description: Parámetros configurables leídos del entorno (.env).
# --------------------------------------------------------------
"""Configuración común del sobre híbrido y de sus colaboradores."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

RSA_MODULUS_BITS = int(os.getenv("RSA_MODULUS_BITS", "2048"))
KEY_PAIR_DIR = os.getenv("KEY_PAIR_DIR", "key-pair")
SYMMETRIC_KEY_FORMAT = os.getenv("SYMMETRIC_KEY_FORMAT", "base64")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configura el logging raíz para los puntos de entrada (consola, scripts)."""

    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
