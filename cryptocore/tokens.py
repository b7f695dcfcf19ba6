# --------------------------------------------------------------
# File: tokens.py
# Description: Generación de material aleatorio seguro y tokens de un solo sentido.
# --------------------------------------------------------------
"""Claves de cifrado, API keys, códigos seguros y seudonimización de PII."""

from __future__ import annotations

import hashlib
import hmac
from typing import Optional

from cryptocore.codec import b64_encode, hex_encode, to_bytes
from cryptocore.config import CryptoSettings, get_settings
from cryptocore.random_source import secure_random_bytes


def generate_encryption_key(settings: Optional[CryptoSettings] = None) -> str:
    """Genera una clave AES-256 aleatoria en hexadecimal (64 caracteres)."""

    settings = settings or get_settings()
    return hex_encode(secure_random_bytes(settings.key_len))


def generate_api_key(settings: Optional[CryptoSettings] = None) -> str:
    """Genera una credencial opaca de portador codificada en Base64."""

    settings = settings or get_settings()
    return b64_encode(secure_random_bytes(settings.api_key_len))


def hash_api_key(api_key: str) -> str:
    """Digest SHA-256 en hexadecimal; solo este valor debe almacenarse."""

    return hashlib.sha256(to_bytes(api_key)).hexdigest()


def verify_api_key(api_key: str, stored_hash: str) -> bool:
    """Compara una API key entrante con su digest almacenado en tiempo constante."""

    if not isinstance(stored_hash, str):
        return False
    return hmac.compare_digest(
        hash_api_key(api_key).encode("ascii"), stored_hash.encode("utf-8")
    )


def tokenize_pii(value: str, settings: Optional[CryptoSettings] = None) -> str:
    """Seudonimiza un valor PII para mostrarlo o deduplicarlo.

    El resultado es de un solo sentido pero VINCULABLE: valores iguales
    producen siempre el mismo token, por lo que no ofrece anonimato. No debe
    usarse como garantía de privacidad.

    Args:
        value (str): Valor sensible original.
        settings (Optional[CryptoSettings]): Prefijo y longitud del digest.

    Returns:
        str: Prefijo seguido de los primeros caracteres del SHA-256 hexadecimal.

    """

    settings = settings or get_settings()
    digest = hashlib.sha256(to_bytes(value)).hexdigest()
    return f"{settings.pii_token_prefix}{digest[: settings.pii_digest_chars]}"


def generate_secure_code(
    length_bytes: Optional[int] = None, settings: Optional[CryptoSettings] = None
) -> str:
    """Genera un código aleatorio en hexadecimal (códigos de verificación, resets).

    Args:
        length_bytes (Optional[int]): Bytes aleatorios; por defecto 32.
        settings (Optional[CryptoSettings]): Parámetros; por defecto los del proceso.

    Returns:
        str: Código de `2 * length_bytes` caracteres hexadecimales.

    Raises:
        InvalidInput: Si la longitud no es un entero positivo.

    """

    if length_bytes is None:
        length_bytes = (settings or get_settings()).secure_code_len
    return hex_encode(secure_random_bytes(length_bytes))
