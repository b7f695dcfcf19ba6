# --------------------------------------------------------------
# File: test_models.py
# Description: Pruebas de los modelos PasswordHash y EncryptedPayload.
# --------------------------------------------------------------

import pydantic
import pytest

from cryptocore.errors import InvalidInput, MalformedPasswordHash
from cryptocore.models import EncryptedPayload, PasswordHash


def test_password_hash_serialization():
    ph = PasswordHash(salt=b"\x01" * 16, derived_key=b"\x02" * 64)
    stored = ph.to_string()
    assert stored == "01" * 16 + ":" + "02" * 64
    assert PasswordHash.parse(stored) == ph


@pytest.mark.parametrize("stored", ["", "a:b:c", "0011", "00:xx", None])
def test_password_hash_parse_errors(stored):
    """Los errores de formato son también InvalidInput."""
    with pytest.raises(MalformedPasswordHash):
        PasswordHash.parse(stored)
    assert issubclass(MalformedPasswordHash, InvalidInput)


def test_payload_is_frozen():
    payload = EncryptedPayload(ciphertext="aa", iv="00" * 16, auth_tag="11" * 16)
    with pytest.raises(pydantic.ValidationError):
        payload.iv = "ff"
