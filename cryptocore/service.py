# --------------------------------------------------------------
# File: service.py
# Description: Fachada inmutable que agrupa las primitivas bajo una configuración.
# --------------------------------------------------------------
"""Servicio de cifrado sin estado mutable, seguro para llamadas concurrentes."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from cryptocore import crypto_kdf, crypto_mac, crypto_sym, tokens
from cryptocore.codec import BytesLike
from cryptocore.config import CryptoSettings, get_settings
from cryptocore.crypto_sym import KeyLike
from cryptocore.models import EncryptedPayload


class EncryptionService:
    """Expone todas las operaciones ligadas a un `CryptoSettings` fijo."""

    __slots__ = ("_settings",)

    def __init__(self, settings: Optional[CryptoSettings] = None) -> None:
        object.__setattr__(self, "_settings", settings or get_settings())

    def __setattr__(self, name, value):
        raise AttributeError("EncryptionService es inmutable.")

    @property
    def settings(self) -> CryptoSettings:
        return self._settings

    # Contraseñas
    def hash_password(self, password: str) -> str:
        return crypto_kdf.hash_password(password, self._settings)

    def verify_password(self, password: str, stored: str) -> bool:
        return crypto_kdf.verify_password(password, stored, self._settings)

    async def hash_password_async(self, password: str) -> str:
        return await crypto_kdf.hash_password_async(password, self._settings)

    async def verify_password_async(self, password: str, stored: str) -> bool:
        return await crypto_kdf.verify_password_async(password, stored, self._settings)

    # Cifrado autenticado
    def encrypt_data(self, data: BytesLike, key: KeyLike) -> EncryptedPayload:
        return crypto_sym.encrypt(data, key, settings=self._settings)

    def decrypt_data(self, ciphertext: str, key: KeyLike, iv: str, auth_tag: str) -> str:
        return crypto_sym.decrypt_text(ciphertext, key, iv, auth_tag, settings=self._settings)

    def encrypt_sensitive_field(self, value: str, master_key: KeyLike) -> EncryptedPayload:
        return crypto_sym.encrypt_sensitive_field(value, master_key, self._settings)

    def decrypt_sensitive_field(
        self, encrypted: str, master_key: KeyLike, iv: str, tag: str
    ) -> str:
        return crypto_sym.decrypt_sensitive_field(
            encrypted, master_key, iv, tag, self._settings
        )

    # HMAC
    def generate_hmac(self, data: BytesLike, secret: BytesLike) -> str:
        return crypto_mac.generate_hmac(data, secret)

    def verify_hmac(self, data: BytesLike, signature: BytesLike, secret: BytesLike) -> bool:
        return crypto_mac.verify_hmac(data, signature, secret)

    # Tokens
    def generate_encryption_key(self) -> str:
        return tokens.generate_encryption_key(self._settings)

    def generate_api_key(self) -> str:
        return tokens.generate_api_key(self._settings)

    def hash_api_key(self, api_key: str) -> str:
        return tokens.hash_api_key(api_key)

    def verify_api_key(self, api_key: str, stored_hash: str) -> bool:
        return tokens.verify_api_key(api_key, stored_hash)

    def tokenize_pii(self, value: str) -> str:
        return tokens.tokenize_pii(value, self._settings)

    def generate_secure_code(self, length_bytes: Optional[int] = None) -> str:
        return tokens.generate_secure_code(length_bytes, self._settings)


@lru_cache(maxsize=1)
def get_encryption_service() -> EncryptionService:
    """Instancia compartida por todo el proceso."""

    return EncryptionService()
