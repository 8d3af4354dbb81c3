# --------------------------------------------------------------
# File: keygen.py
# Description: Generación y persistencia en disco del material de claves.
# --------------------------------------------------------------
"""Utilidades para crear el par RSA y la clave AES en un directorio de claves."""

import logging
import os

from envelope.config import KEY_PAIR_DIR, RSA_MODULUS_BITS
from envelope.crypto_asym import (
    PrivateKeyHandle,
    PublicKeyHandle,
    import_private_key_pem,
    import_public_key_pem,
    rsa_generate_keypair,
)
from envelope.crypto_sym import (
    SymmetricKey,
    export_symmetric_key,
    generate_symmetric_key,
    import_symmetric_key,
)
from envelope.models import KeyPairPaths

logger = logging.getLogger(__name__)

PUBLIC_KEY_FILE = "publicKey.pem"
PRIVATE_KEY_FILE = "privateKey.pem"
SYMMETRIC_KEY_FILE = "symmetricKey.txt"


def _write_text(path: str, content: str) -> None:
    """Escribe el fichero de forma atómica creando el directorio padre."""

    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    tmp_path = f"{path}.tmp"
    with open(tmp_path, "w", encoding="utf-8") as handler:
        handler.write(content)
    os.replace(tmp_path, path)


def _read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as handler:
        return handler.read()


def gen_asymmetric(
    modulus_bits: int = RSA_MODULUS_BITS, out_dir: str = KEY_PAIR_DIR
) -> KeyPairPaths:
    """Genera un par RSA y guarda publicKey.pem (SPKI) y privateKey.pem (PKCS8).

    Args:
        modulus_bits (int): Tamaño del módulo RSA.
        out_dir (str): Directorio de destino.

    Returns:
        KeyPairPaths: Rutas de los dos ficheros escritos.

    """

    private_key, public_key = rsa_generate_keypair(modulus_bits)
    paths = KeyPairPaths(
        public_key=os.path.join(out_dir, PUBLIC_KEY_FILE),
        private_key=os.path.join(out_dir, PRIVATE_KEY_FILE),
    )
    _write_text(paths.public_key, public_key.export_pem())
    _write_text(paths.private_key, private_key.export_pem())
    logger.info("Par RSA-%d guardado en %s", modulus_bits, out_dir)
    return paths


def gen_symmetric(out_dir: str = KEY_PAIR_DIR) -> str:
    """Genera una clave AES-256 y la guarda en hexadecimal en symmetricKey.txt."""

    key_text = export_symmetric_key(generate_symmetric_key(), "hex")
    _write_text(os.path.join(out_dir, SYMMETRIC_KEY_FILE), key_text)
    logger.info("Clave simétrica guardada en %s", out_dir)
    return key_text


def load_public_key(out_dir: str = KEY_PAIR_DIR) -> PublicKeyHandle:
    return import_public_key_pem(_read_text(os.path.join(out_dir, PUBLIC_KEY_FILE)))


def load_private_key(out_dir: str = KEY_PAIR_DIR) -> PrivateKeyHandle:
    return import_private_key_pem(_read_text(os.path.join(out_dir, PRIVATE_KEY_FILE)))


def load_symmetric_key(out_dir: str = KEY_PAIR_DIR) -> SymmetricKey:
    # El fichero puede acabar en salto de línea si se editó a mano.
    return import_symmetric_key(_read_text(os.path.join(out_dir, SYMMETRIC_KEY_FILE)).strip())
