# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Clave AES-256 y primitivas AES-GCM del sobre híbrido.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico y de codificación de la clave AES."""

from __future__ import annotations

import base64
import binascii
import logging
import os
import re
from typing import Optional, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from envelope.errors import IntegrityFailure, InvalidKeyLength, UnsupportedKeyFormat

logger = logging.getLogger(__name__)

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16

_HEX_KEY = re.compile(r"[0-9a-fA-F]{64}")


class SymmetricKey:
    """Clave AES-256 inmutable.

    El material solo sale del objeto a través de `export_symmetric_key` o
    de las primitivas AES-GCM de este módulo.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: bytes):
        if len(raw) != KEY_SIZE:
            raise InvalidKeyLength(len(raw), KEY_SIZE)
        self._raw = bytes(raw)

    @property
    def raw(self) -> bytes:
        return self._raw

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymmetricKey):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return "SymmetricKey(<redacted>)"


def generate_symmetric_key() -> SymmetricKey:
    """Genera una clave AES-256 a partir del generador seguro del sistema.

    Returns:
        SymmetricKey: Clave nueva de 32 bytes.

    """

    return SymmetricKey(os.urandom(KEY_SIZE))


def export_symmetric_key(key: SymmetricKey, fmt: str = "base64") -> str:
    """Exporta la clave a texto.

    Args:
        key (SymmetricKey): Clave que se exportará.
        fmt (str): ``"base64"`` (44 caracteres con relleno) o ``"hex"`` (64 caracteres).

    Returns:
        str: Representación textual determinista de los 32 bytes.

    Raises:
        ValueError: Si el formato solicitado no está soportado.

    """

    if fmt == "base64":
        return base64.b64encode(key.raw).decode("ascii")
    if fmt == "hex":
        return key.raw.hex()
    raise ValueError(f"Formato de exportación no soportado: {fmt}")


def import_symmetric_key(text: str) -> SymmetricKey:
    """Importa una clave AES-256 detectando si el texto es base64 o hex.

    La detección es estructural: 44 caracteres terminados en ``=`` se tratan
    como base64 y 64 caracteres hexadecimales como hex. Cualquier otra forma
    se rechaza.

    Args:
        text (str): Clave exportada.

    Returns:
        SymmetricKey: Clave reconstruida.

    Raises:
        UnsupportedKeyFormat: Si el texto no encaja en ninguna de las dos formas.
        InvalidKeyLength: Si tras decodificar no se obtienen 32 bytes.

    """

    if len(text) == 44 and text.endswith("="):
        try:
            raw = base64.b64decode(text, validate=True)
        except binascii.Error as exc:
            raise UnsupportedKeyFormat(
                f"Clave base64 no decodificable (longitud {len(text)})"
            ) from exc
    elif _HEX_KEY.fullmatch(text):
        raw = bytes.fromhex(text)
    else:
        # Solo se muestra el prefijo para no volcar la clave completa.
        raise UnsupportedKeyFormat(
            f"Formato de clave no soportado. Longitud: {len(text)}, inicio: {text[:4]!r}..."
        )

    if len(raw) != KEY_SIZE:
        raise InvalidKeyLength(len(raw), KEY_SIZE)
    return SymmetricKey(raw)


def aes_gcm_encrypt_with_key(
    key: SymmetricKey, plaintext: bytes, aad: Optional[bytes] = None
) -> Tuple[bytes, bytes, bytes]:
    """Cifra datos con AES-256-GCM utilizando una clave proporcionada.

    Cada llamada genera un nonce aleatorio de 96 bits nuevo.

    Args:
        key (SymmetricKey): Clave simétrica de 256 bits.
        plaintext (bytes): Datos a cifrar.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        Tuple[bytes, bytes, bytes]: Ciphertext sin etiqueta, nonce y tag.

    """

    nonce = os.urandom(NONCE_SIZE)
    aes = AESGCM(key.raw)
    ct_full = aes.encrypt(nonce, plaintext, aad)
    tag = ct_full[-TAG_SIZE:]
    ciphertext = ct_full[:-TAG_SIZE]
    return ciphertext, nonce, tag


def aes_gcm_decrypt_with_key(
    key: SymmetricKey,
    nonce: bytes,
    ciphertext: bytes,
    tag: bytes,
    aad: Optional[bytes] = None,
) -> bytes:
    """Descifra datos con AES-256-GCM verificando la etiqueta.

    Args:
        key (SymmetricKey): Clave simétrica que protege los datos.
        nonce (bytes): Vector de inicialización de 96 bits.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        IntegrityFailure: Si la etiqueta no coincide; no se devuelve nada del claro.

    """

    aes = AESGCM(key.raw)
    try:
        return aes.decrypt(nonce, ciphertext + tag, aad)
    except InvalidTag as exc:
        logger.warning("AES-GCM: etiqueta de autenticación inválida")
        raise IntegrityFailure("La etiqueta de autenticación AES-GCM no coincide") from exc
