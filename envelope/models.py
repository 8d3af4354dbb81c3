# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

from pydantic import BaseModel, ConfigDict, Field


class EnvelopeParts(BaseModel):
    """Representa las tres secciones de un sobre AES-GCM decodificado.

    Attributes:
        iv (bytes): Vector de inicialización de 96 bits.
        ciphertext (bytes): Datos cifrados sin etiqueta (puede estar vacío).
        tag (bytes): Etiqueta de autenticación de 128 bits.

    """

    iv: bytes
    ciphertext: bytes
    tag: bytes


class WireRecord(BaseModel):
    """Registro transmisible del cifrado híbrido.

    Los nombres JSON (`contentEncrypt`, `aseKeyEncrypt`) son los que espera
    el cliente de navegador; en Python se usan los nombres en snake_case.

    Attributes:
        content_encrypt (str): Sobre AES-GCM codificado en Base64.
        ase_key_encrypt (str): Clave simétrica exportada y cifrada con RSA-OAEP, en Base64.

    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    content_encrypt: str = Field(..., alias="contentEncrypt")
    ase_key_encrypt: str = Field(..., alias="aseKeyEncrypt")

    def to_json(self) -> str:
        """Serializa el registro con los nombres de campo del protocolo."""

        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, payload: str) -> "WireRecord":
        """Reconstruye el registro a partir de su JSON."""

        return cls.model_validate_json(payload)


class HashResult(BaseModel):
    """Resultado de derivar un hash de contraseña con PBKDF2.

    Attributes:
        hash (str): Derivación en hexadecimal.
        salt (str): Sal utilizada, tal y como se pasó al KDF.

    """

    hash: str
    salt: str


class KeyPairPaths(BaseModel):
    """Rutas de los ficheros PEM generados por `envelope_api.keygen`."""

    public_key: str
    private_key: str
