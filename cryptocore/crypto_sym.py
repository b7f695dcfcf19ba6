# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-256-GCM para cifrado y descifrado autenticado.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico para proteger datos y campos sensibles."""

from __future__ import annotations

import logging
from typing import Optional, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from cryptocore.codec import BytesLike, hex_decode, hex_encode, to_bytes
from cryptocore.config import CryptoSettings, get_settings
from cryptocore.errors import AuthenticationFailed, InvalidInput, InvalidKeyLength
from cryptocore.models import EncryptedPayload
from cryptocore.random_source import secure_random_bytes

logger = logging.getLogger(__name__)

KeyLike = Union[bytes, bytearray, str]


def _coerce_key(key: KeyLike, settings: CryptoSettings) -> bytes:
    """Acepta la clave en bytes o en hexadecimal y comprueba su longitud."""

    if isinstance(key, str):
        try:
            raw = hex_decode(key, field="key")
        except InvalidInput:
            raise InvalidKeyLength("La clave debe ser de 256 bits.") from None
    elif isinstance(key, (bytes, bytearray)):
        raw = bytes(key)
    else:
        raise InvalidKeyLength("La clave debe ser de 256 bits.")
    if len(raw) != settings.key_len:
        raise InvalidKeyLength("La clave debe ser de 256 bits.")
    return raw


def encrypt(
    plaintext: BytesLike,
    key: KeyLike,
    aad: Optional[bytes] = None,
    settings: Optional[CryptoSettings] = None,
) -> EncryptedPayload:
    """Cifra datos con AES-256-GCM usando un IV aleatorio nuevo.

    Args:
        plaintext (BytesLike): Datos a cifrar; el texto se codifica en UTF-8.
        key (KeyLike): Clave de 32 bytes, en bruto o en hexadecimal.
        aad (Optional[bytes]): Datos autenticados adicionales.
        settings (Optional[CryptoSettings]): Parámetros; por defecto los del proceso.

    Returns:
        EncryptedPayload: Ciphertext, IV y tag codificados en hexadecimal.

    Raises:
        InvalidKeyLength: Si la clave no mide 32 bytes.

    """

    settings = settings or get_settings()
    raw_key = _coerce_key(key, settings)
    data = to_bytes(plaintext)
    iv = secure_random_bytes(settings.iv_len)
    ct_full = AESGCM(raw_key).encrypt(iv, data, aad)
    tag = ct_full[-settings.tag_len:]
    ciphertext = ct_full[: -settings.tag_len]
    return EncryptedPayload(
        ciphertext=hex_encode(ciphertext), iv=hex_encode(iv), auth_tag=hex_encode(tag)
    )


def decrypt(
    ciphertext: str,
    key: KeyLike,
    iv: str,
    auth_tag: str,
    aad: Optional[bytes] = None,
    settings: Optional[CryptoSettings] = None,
) -> bytes:
    """Descifra y autentica datos AES-256-GCM.

    Args:
        ciphertext (str): Datos cifrados sin etiqueta, en hexadecimal.
        key (KeyLike): Clave simétrica que protege los datos.
        iv (str): Vector de inicialización en hexadecimal.
        auth_tag (str): Etiqueta de autenticación en hexadecimal.
        aad (Optional[bytes]): Datos autenticados adicionales usados al cifrar.
        settings (Optional[CryptoSettings]): Parámetros; por defecto los del proceso.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        InvalidKeyLength: Si la clave no mide 32 bytes.
        InvalidInput: Si algún valor no es hexadecimal o el IV/tag tiene otra longitud.
        AuthenticationFailed: Si el tag no coincide; nunca se devuelve texto parcial.

    """

    settings = settings or get_settings()
    raw_key = _coerce_key(key, settings)
    ct = hex_decode(ciphertext, field="ciphertext")
    raw_iv = hex_decode(iv, field="iv", length=settings.iv_len)
    tag = hex_decode(auth_tag, field="auth_tag", length=settings.tag_len)
    try:
        return AESGCM(raw_key).decrypt(raw_iv, ct + tag, aad)
    except InvalidTag:
        logger.info("Descifrado rechazado: tag de autenticación no válido")
        raise AuthenticationFailed() from None


def decrypt_text(
    ciphertext: str,
    key: KeyLike,
    iv: str,
    auth_tag: str,
    aad: Optional[bytes] = None,
    settings: Optional[CryptoSettings] = None,
) -> str:
    """Igual que `decrypt`, devolviendo el resultado como texto UTF-8."""

    plaintext = decrypt(ciphertext, key, iv, auth_tag, aad=aad, settings=settings)
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError:
        raise InvalidInput("El contenido descifrado no es texto UTF-8.") from None


def decrypt_payload(
    payload: EncryptedPayload, key: KeyLike, settings: Optional[CryptoSettings] = None
) -> bytes:
    return decrypt(payload.ciphertext, key, payload.iv, payload.auth_tag, settings=settings)


# Cifrado a nivel de campo: mismo contrato aplicado a atributos individuales.
def encrypt_sensitive_field(
    value: str, master_key: KeyLike, settings: Optional[CryptoSettings] = None
) -> EncryptedPayload:
    return encrypt(value, master_key, settings=settings)


def decrypt_sensitive_field(
    encrypted: str,
    master_key: KeyLike,
    iv: str,
    tag: str,
    settings: Optional[CryptoSettings] = None,
) -> str:
    return decrypt_text(encrypted, master_key, iv, tag, settings=settings)
