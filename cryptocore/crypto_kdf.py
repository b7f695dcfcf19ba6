# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Hash y verificación de contraseñas mediante Argon2id.
# --------------------------------------------------------------
"""Derivación de claves con memoria dura para almacenar contraseñas verificables."""

from __future__ import annotations

import asyncio
import hmac
import logging
from typing import Optional

from argon2 import exceptions as argon_exc
from argon2.low_level import Type, hash_secret_raw

from cryptocore.config import CryptoSettings, KdfParams, get_settings
from cryptocore.errors import KeyDerivationFailure, MalformedPasswordHash
from cryptocore.models import PasswordHash
from cryptocore.random_source import secure_random_bytes

logger = logging.getLogger(__name__)


def derive_key(password: str, salt: bytes, params: KdfParams) -> bytes:
    """Deriva una clave usando Argon2id.

    Args:
        password (str): Contraseña en claro del usuario.
        salt (bytes): Salt aleatoria asociada a la contraseña.
        params (KdfParams): Costes temporales, de memoria y longitud de salida.

    Returns:
        bytes: Clave derivada de `params.hash_len` bytes.

    Raises:
        KeyDerivationFailure: Si Argon2 falla internamente.

    """

    try:
        return hash_secret_raw(
            password.encode("utf-8"),
            salt,
            time_cost=params.time_cost,
            memory_cost=params.memory_cost,
            parallelism=params.parallelism,
            hash_len=params.hash_len,
            type=Type.ID,
        )
    except argon_exc.HashingError as exc:
        logger.error("Fallo interno de Argon2id")
        raise KeyDerivationFailure("No se ha podido derivar la clave.") from exc


def hash_password(password: str, settings: Optional[CryptoSettings] = None) -> str:
    """Genera el hash almacenable de una contraseña con salt nueva.

    Args:
        password (str): Contraseña en claro.
        settings (Optional[CryptoSettings]): Parámetros; por defecto los del proceso.

    Returns:
        str: Valor `<saltHex>:<derivedKeyHex>`.

    """

    params = (settings or get_settings()).kdf
    salt = secure_random_bytes(params.salt_len)
    derived = derive_key(password, salt, params)
    return PasswordHash(salt=salt, derived_key=derived).to_string()


def verify_password_strict(
    password: str, stored: str, settings: Optional[CryptoSettings] = None
) -> bool:
    """Verifica una contraseña distinguiendo registros corruptos.

    Returns:
        bool: True solo si la clave re-derivada coincide en tiempo constante.

    Raises:
        MalformedPasswordHash: Si `stored` no puede interpretarse.

    """

    params = (settings or get_settings()).kdf
    parsed = PasswordHash.parse(stored)
    if len(parsed.salt) != params.salt_len:
        raise MalformedPasswordHash("Formato de hash de contraseña no válido.")
    if len(parsed.derived_key) != params.hash_len:
        return False
    candidate = derive_key(password, parsed.salt, params)
    return hmac.compare_digest(candidate, parsed.derived_key)


def verify_password(
    password: str, stored: str, settings: Optional[CryptoSettings] = None
) -> bool:
    """Verifica una contraseña; los hashes mal formados cuentan como fallo."""

    try:
        return verify_password_strict(password, stored, settings)
    except MalformedPasswordHash:
        logger.warning("Hash de contraseña almacenado con formato no válido")
        return False


async def hash_password_async(
    password: str, settings: Optional[CryptoSettings] = None
) -> str:
    """Ejecuta `hash_password` en un hilo para no bloquear el bucle de eventos.

    Cancelar la espera no interrumpe la derivación; el resultado se descarta.
    """

    return await asyncio.to_thread(hash_password, password, settings)


async def verify_password_async(
    password: str, stored: str, settings: Optional[CryptoSettings] = None
) -> bool:
    return await asyncio.to_thread(verify_password, password, stored, settings)
