# --------------------------------------------------------------
# File: crypto_asym.py
# Description: Par de claves RSA con importación restringida por capacidad.
# --------------------------------------------------------------
"""Generación, importación y exportación de claves RSA-OAEP (SHA-256).

La clave pública solo sabe cifrar y la privada solo sabe descifrar: las
funciones de importación devuelven manejadores que no exponen la otra
operación ni el objeto de `cryptography` subyacente.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
from typing import Tuple

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from envelope.errors import InvalidKeyMaterial, KeyUnwrapFailure

logger = logging.getLogger(__name__)

MIN_MODULUS_BITS = 1024
RECOMMENDED_MODULUS_BITS = 2048
PUBLIC_EXPONENT = 65537

_PEM_FRAME = re.compile(r"-----(BEGIN|END) [A-Z ]+-----")


def _oaep() -> padding.OAEP:
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


def _pem_body_to_der(text: str) -> bytes:
    """Elimina cabecera, pie y espacios del PEM y decodifica el Base64 restante."""

    body = re.sub(r"\s", "", _PEM_FRAME.sub("", text))
    try:
        return base64.b64decode(body, validate=True)
    except binascii.Error as exc:
        raise InvalidKeyMaterial("El cuerpo PEM no es Base64 válido") from exc


class PublicKeyHandle:
    """Clave pública RSA con capacidad exclusiva de cifrado."""

    __slots__ = ("_key",)

    def __init__(self, key: rsa.RSAPublicKey):
        self._key = key

    @property
    def key_size(self) -> int:
        return self._key.key_size

    def encrypt(self, data: bytes) -> bytes:
        """Cifra `data` con RSA-OAEP/SHA-256."""

        return self._key.encrypt(data, _oaep())

    def export_pem(self) -> str:
        """Exporta la clave en PEM SubjectPublicKeyInfo."""

        return self._key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        ).decode("ascii")

    def __repr__(self) -> str:
        return f"PublicKeyHandle(rsa-{self.key_size})"


class PrivateKeyHandle:
    """Clave privada RSA con capacidad exclusiva de descifrado."""

    __slots__ = ("_key",)

    def __init__(self, key: rsa.RSAPrivateKey):
        self._key = key

    @property
    def key_size(self) -> int:
        return self._key.key_size

    def decrypt(self, data: bytes) -> bytes:
        """Descifra `data` con RSA-OAEP/SHA-256.

        Raises:
            KeyUnwrapFailure: Ante cualquier fallo; el detalle del relleno no se
                propaga para no ofrecer un oráculo.

        """

        try:
            return self._key.decrypt(data, _oaep())
        except ValueError as exc:
            logger.warning("RSA-OAEP: no se pudo desenvolver la clave")
            raise KeyUnwrapFailure("No se pudo descifrar la clave envuelta") from exc

    def public_key(self) -> PublicKeyHandle:
        return PublicKeyHandle(self._key.public_key())

    def export_pem(self) -> str:
        """Exporta la clave en PEM PKCS8 sin cifrar."""

        return self._key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        ).decode("ascii")

    def __repr__(self) -> str:
        return f"PrivateKeyHandle(rsa-{self.key_size})"


def rsa_generate_keypair(modulus_bits: int) -> Tuple[PrivateKeyHandle, PublicKeyHandle]:
    """Genera un par RSA con el tamaño de módulo indicado.

    Args:
        modulus_bits (int): Tamaño del módulo en bits; obligatorio.

    Returns:
        Tuple[PrivateKeyHandle, PublicKeyHandle]: Clave privada y pública.

    Raises:
        ValueError: Si el módulo es inferior a 1024 bits.

    """

    if modulus_bits < MIN_MODULUS_BITS:
        raise ValueError(f"El módulo RSA debe ser de al menos {MIN_MODULUS_BITS} bits")
    if modulus_bits < RECOMMENDED_MODULUS_BITS:
        logger.warning(
            "Módulo RSA de %d bits por debajo de los %d recomendados",
            modulus_bits,
            RECOMMENDED_MODULUS_BITS,
        )

    private_key = rsa.generate_private_key(
        public_exponent=PUBLIC_EXPONENT,
        key_size=modulus_bits,
    )
    return PrivateKeyHandle(private_key), PublicKeyHandle(private_key.public_key())


def import_public_key_pem(text: str) -> PublicKeyHandle:
    """Importa una clave pública RSA (SPKI) desde PEM o Base64 desnudo.

    Args:
        text (str): PEM con cabecera/pie o solo el cuerpo Base64.

    Returns:
        PublicKeyHandle: Manejador con capacidad de cifrado.

    Raises:
        InvalidKeyMaterial: Si el DER no es una clave pública RSA.

    """

    der = _pem_body_to_der(text)
    try:
        key = serialization.load_der_public_key(der)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise InvalidKeyMaterial("No se pudo cargar la clave pública SPKI") from exc
    if not isinstance(key, rsa.RSAPublicKey):
        raise InvalidKeyMaterial("La clave pública no es RSA")
    return PublicKeyHandle(key)


def import_private_key_pem(text: str) -> PrivateKeyHandle:
    """Importa una clave privada RSA (PKCS8) desde PEM o Base64 desnudo."""

    der = _pem_body_to_der(text)
    try:
        key = serialization.load_der_private_key(der, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise InvalidKeyMaterial("No se pudo cargar la clave privada PKCS8") from exc
    if not isinstance(key, rsa.RSAPrivateKey):
        raise InvalidKeyMaterial("La clave privada no es RSA")
    return PrivateKeyHandle(key)
