# --------------------------------------------------------------
# File: test_crypto_mac.py
# Description: Pruebas de generación y verificación HMAC-SHA256.
# --------------------------------------------------------------

import hashlib
import hmac

import pytest

from cryptocore.crypto_mac import generate_hmac, verify_hmac


def test_hmac_matches_reference():
    """La firma coincide con HMAC-SHA256 de la biblioteca estándar."""
    expected = hmac.new(b"secret", b"data", hashlib.sha256).hexdigest()
    assert generate_hmac("data", "secret") == expected
    assert len(expected) == 64


def test_hmac_is_deterministic():
    """La misma entrada produce siempre la misma firma."""
    assert generate_hmac(b"payload", b"k") == generate_hmac(b"payload", b"k")


def test_verify_ok():
    sig = generate_hmac("payload", "k")
    assert verify_hmac("payload", sig, "k") is True


@pytest.mark.parametrize(
    "data, secret",
    [("payload!", "k"), ("payload", "k2"), ("", "k")],
)
def test_verify_fails_on_mutation(data, secret):
    """Modificar los datos o el secreto invalida la firma."""
    sig = generate_hmac("payload", "k")
    assert verify_hmac(data, sig, secret) is False


@pytest.mark.parametrize("signature", ["", "abc", "0" * 63, "0" * 65, "ñ" * 64, b"\xff" * 32])
def test_verify_length_mismatch_returns_false(signature):
    """Firmas de otra longitud o no ASCII devuelven False sin lanzar."""
    assert verify_hmac("payload", signature, "k") is False


@pytest.mark.parametrize("data, secret", [(123, "k"), ("payload", None)])
def test_verify_invalid_data_or_secret_returns_false(data, secret):
    """Datos o secreto de tipo no admitido devuelven False sin lanzar."""
    sig = generate_hmac("payload", "k")
    assert verify_hmac(data, sig, secret) is False
