# --------------------------------------------------------------
# File: crypto_hash.py
# Description: Hash de contraseñas con PBKDF2-HMAC-SHA512.
# --------------------------------------------------------------
"""Derivación de hashes de contraseña, independiente del sobre híbrido."""

import hmac
import os
from typing import Optional

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from envelope.models import HashResult

ITERATIONS = 100_000
# Longitud corta heredada de los hashes ya almacenados.
KEY_LENGTH = 6
SALT_BYTES = 4


def to_hash(
    content: str,
    salt: Optional[str] = None,
    *,
    iterations: int = ITERATIONS,
    key_length: int = KEY_LENGTH,
) -> HashResult:
    """Deriva el hash PBKDF2-SHA512 de `content`.

    Args:
        content (str): Contraseña en claro.
        salt (Optional[str]): Sal textual; si se omite se generan 4 bytes
            aleatorios en hexadecimal.
        iterations (int): Iteraciones de PBKDF2.
        key_length (int): Longitud en bytes de la derivación.

    Returns:
        HashResult: Hash en hexadecimal y sal utilizada.

    """

    salt_value = salt if salt is not None else os.urandom(SALT_BYTES).hex()
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA512(),
        length=key_length,
        salt=salt_value.encode("utf-8"),
        iterations=iterations,
    )
    digest = kdf.derive(content.encode("utf-8"))
    return HashResult(hash=digest.hex(), salt=salt_value)


def verify_hash(
    content: str,
    expected_hash: str,
    salt: str,
    *,
    iterations: int = ITERATIONS,
    key_length: int = KEY_LENGTH,
) -> bool:
    """Comprueba en tiempo constante que `content` produce `expected_hash`."""

    candidate = to_hash(content, salt, iterations=iterations, key_length=key_length)
    return hmac.compare_digest(candidate.hash, expected_hash.lower())
