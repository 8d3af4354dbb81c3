# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores tipados del sobre híbrido.
# --------------------------------------------------------------
"""Excepciones que distinguen cada modo de fallo del cifrado híbrido."""


class EnvelopeError(ValueError):
    """Error base de todas las operaciones del sobre."""


class UnsupportedKeyFormat(EnvelopeError):
    """El texto de la clave simétrica no es base64 de 44 ni hex de 64 caracteres."""


class InvalidKeyLength(EnvelopeError):
    """La clave simétrica decodificada no mide 32 bytes.

    Attributes:
        actual_length (int): Longitud real obtenida tras decodificar.

    """

    def __init__(self, actual_length: int, expected_length: int = 32):
        super().__init__(
            f"AES-256 requiere una clave de {expected_length} bytes, longitud actual: "
            f"{actual_length} bytes"
        )
        self.actual_length = actual_length
        self.expected_length = expected_length


class MalformedEnvelope(EnvelopeError):
    """El sobre combinado es demasiado corto o no es base64 válido."""


class KeyUnwrapFailure(EnvelopeError):
    """No se pudo desenvolver la clave simétrica con la clave privada RSA."""


class IntegrityFailure(EnvelopeError):
    """La etiqueta de autenticación AES-GCM no coincide."""


class InvalidKeyMaterial(EnvelopeError):
    """El texto PEM/DER no contiene una clave RSA utilizable."""
