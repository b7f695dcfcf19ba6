# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete cryptocore.
# --------------------------------------------------------------
"""Inicializa el paquete `cryptocore` y documenta sus módulos principales."""

__all__ = [
    "codec",
    "config",
    "crypto_kdf",
    "crypto_mac",
    "crypto_sym",
    "errors",
    "models",
    "random_source",
    "service",
    "tokens",
]
