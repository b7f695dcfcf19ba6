# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la configuración criptográfica.
# --------------------------------------------------------------

from typing import Iterator

import pytest

from cryptocore import config, service


@pytest.fixture(autouse=True)
def _fast_kdf(monkeypatch) -> Iterator[None]:
    """Reduce los costes Argon2id y reinicia la configuración cacheada.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.setenv("CRYPTO_KDF_TIME_COST", "1")
    monkeypatch.setenv("CRYPTO_KDF_MEMORY_COST", "1024")
    monkeypatch.setenv("CRYPTO_KDF_PARALLELISM", "1")
    config.get_settings.cache_clear()
    service.get_encryption_service.cache_clear()

    yield

    config.get_settings.cache_clear()
    service.get_encryption_service.cache_clear()


@pytest.fixture
def key() -> bytes:
    """Clave AES-256 fija de ceros."""
    return bytes(32)
