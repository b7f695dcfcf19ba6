# --------------------------------------------------------------
# File: config.py
# Description: Parámetros criptográficos inmutables cargados al arrancar el proceso.
# --------------------------------------------------------------
"""Configuración de costes KDF, tamaños de clave y registro de eventos."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Dict

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()


class KdfParams(BaseModel):
    """Conjunto versionado de costes Argon2id.

    Attributes:
        time_cost (int): Iteraciones Argon2id.
        memory_cost (int): Memoria en KiB consumida por derivación.
        parallelism (int): Número de carriles paralelos.
        hash_len (int): Longitud en bytes de la clave derivada.
        salt_len (int): Longitud en bytes de la salt aleatoria.

    """

    model_config = ConfigDict(frozen=True)

    time_cost: int = Field(ge=1)
    memory_cost: int = Field(ge=8)
    parallelism: int = Field(ge=1)
    hash_len: int = Field(default=64, ge=16)
    salt_len: int = Field(default=16, ge=8)


KDF_PROFILES: Dict[str, KdfParams] = {
    "v1": KdfParams(time_cost=3, memory_cost=64 * 1024, parallelism=1),
}
DEFAULT_KDF_VERSION = "v1"


class CryptoSettings(BaseModel):
    """Parámetros de seguridad compartidos por todas las primitivas."""

    model_config = ConfigDict(frozen=True)

    kdf_version: str = DEFAULT_KDF_VERSION
    kdf: KdfParams = KDF_PROFILES[DEFAULT_KDF_VERSION]

    key_len: int = 32
    iv_len: int = Field(default=16, ge=12)
    tag_len: int = 16

    api_key_len: int = Field(default=32, ge=16)
    secure_code_len: int = Field(default=32, ge=1)
    pii_token_prefix: str = "token_"
    pii_digest_chars: int = Field(default=16, ge=8, le=64)

    log_level: str = "INFO"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} debe ser un entero.") from exc


def load_settings() -> CryptoSettings:
    """Construye la configuración a partir de las variables `CRYPTO_*`.

    Returns:
        CryptoSettings: Parámetros validados e inmutables.

    Raises:
        ValueError: Si la versión KDF no existe o algún valor no es válido.

    """

    version = os.getenv("CRYPTO_KDF_VERSION", DEFAULT_KDF_VERSION)
    if version not in KDF_PROFILES:
        raise ValueError(f"Versión KDF desconocida: {version}")
    profile = KDF_PROFILES[version]

    kdf = KdfParams(
        time_cost=_int_env("CRYPTO_KDF_TIME_COST", profile.time_cost),
        memory_cost=_int_env("CRYPTO_KDF_MEMORY_COST", profile.memory_cost),
        parallelism=_int_env("CRYPTO_KDF_PARALLELISM", profile.parallelism),
        hash_len=profile.hash_len,
        salt_len=profile.salt_len,
    )
    return CryptoSettings(
        kdf_version=version,
        kdf=kdf,
        api_key_len=_int_env("CRYPTO_API_KEY_BYTES", 32),
        secure_code_len=_int_env("CRYPTO_SECURE_CODE_BYTES", 32),
        pii_token_prefix=os.getenv("CRYPTO_PII_TOKEN_PREFIX", "token_"),
        log_level=os.getenv("CRYPTO_LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> CryptoSettings:
    """Devuelve la configuración del proceso, cargada una única vez."""

    return load_settings()


def configure_logging(settings: CryptoSettings | None = None) -> None:
    """Ajusta el nivel del logger del paquete según `CRYPTO_LOG_LEVEL`."""

    settings = settings or get_settings()
    logger = logging.getLogger("cryptocore")
    logger.setLevel(settings.log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)-8s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
