# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con pares RSA reutilizables entre pruebas.
# --------------------------------------------------------------

from typing import Tuple

import pytest

from envelope.crypto_asym import PrivateKeyHandle, PublicKeyHandle, rsa_generate_keypair


@pytest.fixture(scope="session")
def rsa_pair() -> Tuple[PrivateKeyHandle, PublicKeyHandle]:
    """Genera un único par RSA-2048 para toda la sesión de pruebas.

    Returns:
        Tuple[PrivateKeyHandle, PublicKeyHandle]: Clave privada y pública.
    """
    return rsa_generate_keypair(2048)


@pytest.fixture(scope="session")
def other_rsa_pair() -> Tuple[PrivateKeyHandle, PublicKeyHandle]:
    """Segundo par RSA, independiente del primero, para probar claves cruzadas."""
    return rsa_generate_keypair(2048)
