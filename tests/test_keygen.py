# --------------------------------------------------------------
# File: test_keygen.py
# Description: Pruebas de la generación y persistencia del material de claves.
# --------------------------------------------------------------

import importlib
import os
from pathlib import Path
from typing import Callable, Iterator

import pytest

import envelope.config as config
import envelope_api.keygen as keygen_module
from envelope_api.services import decrypt_payload, encrypt_payload


@pytest.fixture
def reload_keygen(monkeypatch) -> Iterator[Callable]:
    """Recarga la configuración y keygen con un KEY_PAIR_DIR temporal.

    Al terminar deshace el entorno y vuelve a recargar ambos módulos para que
    las pruebas siguientes vean la configuración original.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para modificar variables de entorno.

    Returns:
        Iterator[Callable]: Función que recibe el directorio y devuelve keygen recargado.
    """

    def _reload(key_dir: Path):
        monkeypatch.setenv("KEY_PAIR_DIR", str(key_dir))
        monkeypatch.setenv("RSA_MODULUS_BITS", "1024")
        importlib.reload(config)
        return importlib.reload(keygen_module)

    yield _reload

    monkeypatch.undo()
    importlib.reload(config)
    importlib.reload(keygen_module)


def test_gen_asymmetric_writes_pem_files(tmp_path, reload_keygen):
    """Verifica que se escriban los dos PEM y que el par funcione tras recargarlo.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        reload_keygen (Callable): Fixture que recarga keygen con un directorio temporal.

    Returns:
        None: Las aserciones comprueban ficheros y descifrado.
    """
    key_dir = tmp_path / "key-pair"
    keygen = reload_keygen(key_dir)

    paths = keygen.gen_asymmetric()
    assert Path(paths.public_key) == key_dir / "publicKey.pem"
    assert Path(paths.private_key) == key_dir / "privateKey.pem"
    assert (key_dir / "publicKey.pem").read_text(encoding="utf-8").startswith("-----BEGIN PUBLIC KEY-----")
    assert not (key_dir / "publicKey.pem.tmp").exists()

    public_key = keygen.load_public_key()
    private_key = keygen.load_private_key()
    assert public_key.key_size == 1024
    assert decrypt_payload(encrypt_payload("desde disco", public_key), private_key) == "desde disco"


def test_gen_symmetric_writes_hex_key(tmp_path, reload_keygen):
    key_dir = tmp_path / "keys"
    keygen = reload_keygen(key_dir)

    key_text = keygen.gen_symmetric()
    assert len(key_text) == 64
    assert (key_dir / "symmetricKey.txt").read_text(encoding="utf-8") == key_text
    assert keygen.load_symmetric_key().raw.hex() == key_text


def test_keygen_defaults_restored_after_reload():
    """Tras las pruebas con directorio temporal, keygen vuelve a leer el entorno real.

    Returns:
        None: Las aserciones comparan los valores por defecto con el entorno.
    """
    assert keygen_module.KEY_PAIR_DIR == os.getenv("KEY_PAIR_DIR", "key-pair")
    assert keygen_module.RSA_MODULUS_BITS == int(os.getenv("RSA_MODULUS_BITS", "2048"))


def test_load_symmetric_key_tolerates_trailing_newline(tmp_path):
    key_dir = tmp_path / "manual"
    key_dir.mkdir()
    (key_dir / "symmetricKey.txt").write_text("ab" * 32 + "\n", encoding="utf-8")
    assert keygen_module.load_symmetric_key(str(key_dir)).raw == bytes.fromhex("ab" * 32)


def test_explicit_out_dir_overrides_config(tmp_path):
    target = tmp_path / "explicit"
    keygen_module.gen_asymmetric(1024, str(target))
    assert (target / "privateKey.pem").exists()
