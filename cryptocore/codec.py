# --------------------------------------------------------------
# File: codec.py
# Description: Conversión entre bytes y texto hexadecimal/Base64 con validación.
# --------------------------------------------------------------
"""Utilidades de codificación compartidas por las primitivas."""

from __future__ import annotations

import base64
import binascii
from typing import Optional, Union

from cryptocore.errors import InvalidInput

BytesLike = Union[bytes, bytearray, str]


def to_bytes(value: BytesLike) -> bytes:
    """Normaliza texto (UTF-8) o bytes a `bytes`."""

    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise InvalidInput("Se esperaba texto o bytes.")


def hex_encode(data: bytes) -> str:
    return data.hex()


def hex_decode(value: str, *, field: str, length: Optional[int] = None) -> bytes:
    """Decodifica un valor hexadecimal comprobando opcionalmente su longitud.

    Args:
        value (str): Cadena hexadecimal.
        field (str): Nombre lógico del campo, usado en el mensaje de error.
        length (Optional[int]): Longitud exacta en bytes que se exige.

    Returns:
        bytes: Datos decodificados.

    Raises:
        InvalidInput: Si el valor no es hexadecimal o su longitud no coincide.

    """

    if not isinstance(value, str):
        raise InvalidInput(f"{field}: se esperaba una cadena hexadecimal.")
    try:
        raw = binascii.unhexlify(value)
    except (binascii.Error, ValueError):
        raise InvalidInput(f"{field}: hexadecimal no válido.") from None
    if length is not None and len(raw) != length:
        raise InvalidInput(f"{field}: se esperaban {length} bytes.")
    return raw


def b64_encode(data: bytes) -> str:
    """Codifica en Base64 estándar con relleno."""

    return base64.b64encode(data).decode("ascii")

