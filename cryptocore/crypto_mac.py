# --------------------------------------------------------------
# File: crypto_mac.py
# Description: Etiquetas HMAC-SHA256 para integridad y autenticidad de datos.
# --------------------------------------------------------------
"""Generación y verificación en tiempo constante de firmas HMAC."""

import hashlib
import hmac
import logging

from cryptocore.codec import BytesLike, to_bytes
from cryptocore.errors import InvalidInput

logger = logging.getLogger(__name__)


def generate_hmac(data: BytesLike, secret: BytesLike) -> str:
    """Calcula HMAC-SHA256 de `data` con `secret`.

    Args:
        data (BytesLike): Datos a firmar; el texto se codifica en UTF-8.
        secret (BytesLike): Secreto compartido.

    Returns:
        str: Firma de 32 bytes en hexadecimal (64 caracteres).

    """

    return hmac.new(to_bytes(secret), to_bytes(data), hashlib.sha256).hexdigest()


def verify_hmac(data: BytesLike, signature: BytesLike, secret: BytesLike) -> bool:
    """Comprueba una firma HMAC sin lanzar excepciones.

    La comparación usa `hmac.compare_digest`, que no depende de la posición
    de la primera diferencia; una longitud distinta devuelve False.
    """

    try:
        expected = generate_hmac(data, secret).encode("ascii")
        provided = to_bytes(signature)
    except InvalidInput:
        return False
    ok = hmac.compare_digest(provided, expected)
    if not ok:
        logger.info("Firma HMAC rechazada")
    return ok
