# --------------------------------------------------------------
# File: test_tokens.py
# Description: Pruebas de generación de claves, API keys, códigos y tokens PII.
# --------------------------------------------------------------

import base64
import hashlib
import re

import pytest

from cryptocore import random_source
from cryptocore.crypto_sym import decrypt_text, encrypt
from cryptocore.errors import InternalRandomnessFailure, InvalidInput
from cryptocore.tokens import (
    generate_api_key,
    generate_encryption_key,
    generate_secure_code,
    hash_api_key,
    tokenize_pii,
    verify_api_key,
)

HEX = re.compile(r"^[0-9a-f]+$")


def test_encryption_key_is_usable():
    """La clave generada sirve directamente para AES-256-GCM."""
    key = generate_encryption_key()
    assert len(key) == 64 and HEX.match(key)
    payload = encrypt("hola", key)
    assert decrypt_text(payload.ciphertext, key, payload.iv, payload.auth_tag) == "hola"


def test_api_key_is_base64_32_bytes():
    api_key = generate_api_key()
    assert len(base64.b64decode(api_key, validate=True)) == 32
    assert api_key != generate_api_key()


def test_api_key_hash_and_verify():
    """Solo se almacena el digest; la verificación re-hashea la clave."""
    api_key = generate_api_key()
    digest = hash_api_key(api_key)
    assert digest == hashlib.sha256(api_key.encode()).hexdigest()
    assert verify_api_key(api_key, digest) is True
    assert verify_api_key(generate_api_key(), digest) is False
    assert verify_api_key(api_key, "corto") is False


def test_tokenize_pii_is_linkable():
    """Valores iguales producen el mismo token; distintos, tokens distintos."""
    first = tokenize_pii("ana@example.com")
    assert first == tokenize_pii("ana@example.com")
    assert first != tokenize_pii("ana@example.org")
    assert re.match(r"^token_[0-9a-f]{16}$", first)


def test_tokenize_pii_does_not_leak_value():
    assert "ana" not in tokenize_pii("ana@example.com")


def test_secure_code_default_and_custom_length():
    code = generate_secure_code()
    assert len(code) == 64 and HEX.match(code)
    assert code != generate_secure_code(32)
    assert len(generate_secure_code(6)) == 12


@pytest.mark.parametrize("length", [0, -1, 2.5, True])
def test_secure_code_rejects_invalid_length(length):
    with pytest.raises(InvalidInput):
        generate_secure_code(length)


def test_randomness_failure_propagates(monkeypatch):
    """Sin entropía del sistema se lanza un error fatal, sin sustitutos."""

    def _no_entropy(n):
        raise OSError("sin entropía")

    monkeypatch.setattr(random_source.os, "urandom", _no_entropy)
    with pytest.raises(InternalRandomnessFailure):
        generate_secure_code()
    with pytest.raises(InternalRandomnessFailure):
        encrypt("hola", bytes(32))
