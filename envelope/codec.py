# --------------------------------------------------------------
# File: codec.py
# Description: Formato binario IV(12) || ciphertext || tag(16) y su capa Base64.
# --------------------------------------------------------------
"""Codificación y decodificación del sobre AES-GCM compartido con el navegador."""

import base64
import binascii
import logging

from envelope.crypto_sym import NONCE_SIZE, TAG_SIZE
from envelope.errors import MalformedEnvelope
from envelope.models import EnvelopeParts

logger = logging.getLogger(__name__)

MIN_ENVELOPE_SIZE = NONCE_SIZE + TAG_SIZE


def b64encode(data: bytes) -> str:
    """Codifica bytes en Base64 estándar con relleno."""

    return base64.b64encode(data).decode("ascii")


def b64decode(value: str) -> bytes:
    """Decodifica Base64 estándar rechazando caracteres fuera del alfabeto.

    Raises:
        binascii.Error: Si el texto no es Base64 válido.

    """

    return base64.b64decode(value, validate=True)


def encode_envelope(iv: bytes, ciphertext: bytes, tag: bytes) -> bytes:
    """Concatena IV, ciphertext y etiqueta en el orden fijo del protocolo.

    Args:
        iv (bytes): Nonce de 12 bytes.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de 16 bytes.

    Returns:
        bytes: Sobre combinado.

    Raises:
        ValueError: Si el IV o la etiqueta no tienen la longitud esperada.

    """

    if len(iv) != NONCE_SIZE or len(tag) != TAG_SIZE:
        raise ValueError(
            f"IV de {NONCE_SIZE} y tag de {TAG_SIZE} bytes requeridos "
            f"(recibidos {len(iv)} y {len(tag)})"
        )
    return iv + ciphertext + tag


def decode_envelope(blob: bytes) -> EnvelopeParts:
    """Separa el sobre en IV, ciphertext y etiqueta por desplazamientos fijos.

    Un sobre de exactamente 28 bytes es válido y produce un ciphertext vacío.

    Args:
        blob (bytes): Sobre combinado.

    Returns:
        EnvelopeParts: Secciones del sobre.

    Raises:
        MalformedEnvelope: Si el sobre mide menos de 28 bytes.

    """

    total = len(blob)
    if total < MIN_ENVELOPE_SIZE:
        raise MalformedEnvelope(
            f"Sobre demasiado corto: {total} bytes, mínimo {MIN_ENVELOPE_SIZE}"
        )

    iv = blob[:NONCE_SIZE]
    tag = blob[total - TAG_SIZE:]
    ciphertext = blob[NONCE_SIZE:total - TAG_SIZE]
    logger.debug(
        "Sobre: total=%d iv=%d ciphertext=%d tag=%d",
        total,
        len(iv),
        len(ciphertext),
        len(tag),
    )
    return EnvelopeParts(iv=iv, ciphertext=ciphertext, tag=tag)


def pack_content(iv: bytes, ciphertext: bytes, tag: bytes) -> str:
    """Construye el valor `contentEncrypt` (sobre en Base64)."""

    return b64encode(encode_envelope(iv, ciphertext, tag))


def unpack_content(content: str) -> EnvelopeParts:
    """Decodifica `contentEncrypt` y lo separa en sus tres secciones.

    Raises:
        MalformedEnvelope: Si el texto no es Base64 o el sobre es demasiado corto.

    """

    try:
        blob = b64decode(content)
    except binascii.Error as exc:
        raise MalformedEnvelope("contentEncrypt no es Base64 válido") from exc
    return decode_envelope(blob)
