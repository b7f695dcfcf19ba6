# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones de las primitivas criptográficas.
# --------------------------------------------------------------
"""Errores tipados que distinguen entradas inválidas, manipulación y fallos internos."""


class CryptoError(Exception):
    """Base de todos los errores del paquete."""


class InvalidInput(CryptoError):
    """Valor codificado mal formado o longitud de iv/tag incorrecta."""


class InvalidKeyLength(InvalidInput):
    """La clave simétrica no tiene la longitud exigida por AES-256."""


class MalformedPasswordHash(InvalidInput):
    """El hash almacenado no respeta el formato `<salt>:<clave>`."""


class AuthenticationFailed(CryptoError):
    """Los datos no son auténticos: tag AEAD o firma incorrectos."""

    def __init__(self, message: str = "Los datos no son auténticos.") -> None:
        super().__init__(message)


class InternalRandomnessFailure(CryptoError):
    """La fuente de aleatoriedad segura del sistema no está disponible."""


class KeyDerivationFailure(CryptoError):
    """Fallo interno de la función de derivación de claves."""
