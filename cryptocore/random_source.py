# --------------------------------------------------------------
# File: random_source.py
# Description: Acceso único a la fuente de aleatoriedad criptográfica del sistema.
# --------------------------------------------------------------
"""Extracción de bytes aleatorios desde el CSPRNG del sistema operativo."""

import logging
import os

from cryptocore.errors import InternalRandomnessFailure, InvalidInput

logger = logging.getLogger(__name__)


def secure_random_bytes(length: int) -> bytes:
    """Devuelve `length` bytes del CSPRNG del sistema.

    Args:
        length (int): Número de bytes solicitados, mayor que cero.

    Returns:
        bytes: Material aleatorio apto para claves, IV, salts y tokens.

    Raises:
        InvalidInput: Si la longitud no es un entero positivo.
        InternalRandomnessFailure: Si el sistema no puede proporcionar entropía.

    """

    if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
        raise InvalidInput("La longitud debe ser un entero positivo.")
    try:
        return os.urandom(length)
    except (OSError, NotImplementedError) as exc:
        logger.critical("Fuente de aleatoriedad segura no disponible")
        raise InternalRandomnessFailure(
            "No se ha podido obtener aleatoriedad segura."
        ) from exc
