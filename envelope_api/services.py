# --------------------------------------------------------------
# File: services.py
# Description: Cifrado y descifrado híbrido (AES-256-GCM + RSA-OAEP).
# --------------------------------------------------------------
"""Funciones de la capa de servicios que producen y consumen el registro híbrido."""

import binascii
import logging
from typing import Any, Dict, Optional, Union

from envelope.codec import b64decode, b64encode, pack_content, unpack_content
from envelope.config import SYMMETRIC_KEY_FORMAT
from envelope.crypto_asym import (
    PrivateKeyHandle,
    PublicKeyHandle,
    import_private_key_pem,
    import_public_key_pem,
)
from envelope.crypto_sym import (
    SymmetricKey,
    aes_gcm_decrypt_with_key,
    aes_gcm_encrypt_with_key,
    export_symmetric_key,
    generate_symmetric_key,
    import_symmetric_key,
)
from envelope.errors import KeyUnwrapFailure, UnsupportedKeyFormat
from envelope.models import WireRecord

logger = logging.getLogger(__name__)

PublicKeyLike = Union[PublicKeyHandle, str]
PrivateKeyLike = Union[PrivateKeyHandle, str]
SymmetricKeyLike = Union[SymmetricKey, str]


def _as_public(key: PublicKeyLike) -> PublicKeyHandle:
    return import_public_key_pem(key) if isinstance(key, str) else key


def _as_private(key: PrivateKeyLike) -> PrivateKeyHandle:
    return import_private_key_pem(key) if isinstance(key, str) else key


def _as_symmetric(key: SymmetricKeyLike) -> SymmetricKey:
    return import_symmetric_key(key) if isinstance(key, str) else key


def encrypt_by_symmetric(data: str, key: Optional[SymmetricKeyLike] = None) -> str:
    """Cifra texto con AES-256-GCM y devuelve el sobre en Base64.

    Args:
        data (str): Texto en claro.
        key (Optional[SymmetricKeyLike]): Clave o su texto exportado; si se
            omite se genera una nueva (y se pierde, útil solo para pruebas).

    Returns:
        str: Valor `contentEncrypt` con el formato IV || ciphertext || tag.

    """

    aes_key = _as_symmetric(key) if key is not None else generate_symmetric_key()
    ciphertext, nonce, tag = aes_gcm_encrypt_with_key(aes_key, data.encode("utf-8"))
    return pack_content(nonce, ciphertext, tag)


def decrypt_by_symmetric(content: str, key: SymmetricKeyLike) -> str:
    """Descifra un `contentEncrypt` y devuelve el texto original.

    Args:
        content (str): Sobre en Base64.
        key (SymmetricKeyLike): Clave o su texto exportado (base64/hex).

    Returns:
        str: Texto en claro decodificado como UTF-8.

    Raises:
        MalformedEnvelope: Si el sobre no es Base64 o mide menos de 28 bytes.
        IntegrityFailure: Si la etiqueta no verifica.

    """

    aes_key = _as_symmetric(key)
    parts = unpack_content(content)
    plaintext = aes_gcm_decrypt_with_key(aes_key, parts.iv, parts.ciphertext, parts.tag)
    return plaintext.decode("utf-8")


def encrypt_by_asymmetric(data: str, public_key: PublicKeyLike) -> str:
    """Cifra texto corto con RSA-OAEP/SHA-256 y lo devuelve en Base64."""

    return b64encode(_as_public(public_key).encrypt(data.encode("utf-8")))


def decrypt_by_asymmetric(content: str, private_key: PrivateKeyLike) -> str:
    """Descifra un texto cifrado con `encrypt_by_asymmetric`.

    Raises:
        KeyUnwrapFailure: Si el Base64 es inválido o la clave privada no corresponde.
        UnsupportedKeyFormat: Si el resultado no es texto UTF-8.

    """

    try:
        wrapped = b64decode(content)
    except binascii.Error as exc:
        raise KeyUnwrapFailure("aseKeyEncrypt no es Base64 válido") from exc

    raw = _as_private(private_key).decrypt(wrapped)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UnsupportedKeyFormat("La clave desenvuelta no es texto UTF-8") from exc


def encrypt_payload(
    plaintext: str,
    public_key: PublicKeyLike,
    symmetric_key: Optional[SymmetricKeyLike] = None,
) -> WireRecord:
    """Cifra `plaintext` y envuelve la clave AES con la clave pública RSA.

    Args:
        plaintext (str): Contenido a proteger.
        public_key (PublicKeyLike): Clave pública del destinatario (manejador o PEM).
        symmetric_key (Optional[SymmetricKeyLike]): Clave AES a reutilizar; por
            defecto se genera una efímera por llamada.

    Returns:
        WireRecord: Registro con `contentEncrypt` y `aseKeyEncrypt`.

    """

    recipient = _as_public(public_key)
    if symmetric_key is None:
        aes_key = generate_symmetric_key()
    else:
        aes_key = _as_symmetric(symmetric_key)

    content_encrypt = encrypt_by_symmetric(plaintext, aes_key)
    key_text = export_symmetric_key(aes_key, SYMMETRIC_KEY_FORMAT)
    ase_key_encrypt = encrypt_by_asymmetric(key_text, recipient)

    logger.debug("Registro híbrido generado para RSA-%d", recipient.key_size)
    return WireRecord(content_encrypt=content_encrypt, ase_key_encrypt=ase_key_encrypt)


def decrypt_payload(
    record: Union[WireRecord, Dict[str, Any]], private_key: PrivateKeyLike
) -> str:
    """Desenvuelve la clave AES con la clave privada y descifra el contenido.

    Args:
        record (Union[WireRecord, Dict[str, Any]]): Registro recibido; se
            aceptan también diccionarios con las claves JSON del protocolo.
        private_key (PrivateKeyLike): Clave privada (manejador o PEM).

    Returns:
        str: Texto original.

    Raises:
        KeyUnwrapFailure: Si la clave envuelta no se puede descifrar.
        UnsupportedKeyFormat: Si la clave desenvuelta no tiene forma base64/hex.
        InvalidKeyLength: Si la clave desenvuelta no mide 32 bytes.
        MalformedEnvelope: Si el sobre es inválido.
        IntegrityFailure: Si la etiqueta AES-GCM no verifica.

    """

    if not isinstance(record, WireRecord):
        record = WireRecord.model_validate(record)

    key_text = decrypt_by_asymmetric(record.ase_key_encrypt, private_key)
    return decrypt_by_symmetric(record.content_encrypt, key_text)
