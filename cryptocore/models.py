# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan los resultados criptográficos codificados."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, ConfigDict

from cryptocore.codec import hex_decode
from cryptocore.errors import InvalidInput, MalformedPasswordHash

PASSWORD_HASH_DELIMITER = ":"


class EncryptedPayload(BaseModel):
    """Representa el resultado de una operación AES-256-GCM.

    Los tres valores deben persistirse juntos: sin `iv` o `auth_tag` el
    descifrado es imposible.

    Attributes:
        ciphertext (str): Datos cifrados sin etiqueta, en hexadecimal.
        iv (str): Vector de inicialización de 16 bytes, en hexadecimal.
        auth_tag (str): Etiqueta de autenticación de 16 bytes, en hexadecimal.

    """

    model_config = ConfigDict(frozen=True)

    ciphertext: str
    iv: str
    auth_tag: str

    def to_dict(self) -> Dict[str, str]:
        """Serializa con los nombres de campo usados por los servicios HTTP."""

        return {"encryptedData": self.ciphertext, "iv": self.iv, "authTag": self.auth_tag}


class PasswordHash(BaseModel):
    """Salt y clave derivada de una contraseña.

    Attributes:
        salt (bytes): Salt aleatoria única por hash.
        derived_key (bytes): Salida de la KDF para `(password, salt)`.

    """

    model_config = ConfigDict(frozen=True)

    salt: bytes
    derived_key: bytes

    def to_string(self) -> str:
        """Formato de almacenamiento `<saltHex>:<derivedKeyHex>`."""

        return f"{self.salt.hex()}{PASSWORD_HASH_DELIMITER}{self.derived_key.hex()}"

    @classmethod
    def parse(cls, stored: str) -> "PasswordHash":
        """Interpreta un hash almacenado.

        Args:
            stored (str): Valor con exactamente un delimitador `:`.

        Returns:
            PasswordHash: Componentes decodificados.

        Raises:
            MalformedPasswordHash: Si falta o sobra el delimitador, algún
                componente está vacío o no es hexadecimal válido.

        """

        if not isinstance(stored, str) or stored.count(PASSWORD_HASH_DELIMITER) != 1:
            raise MalformedPasswordHash("Formato de hash de contraseña no válido.")
        salt_hex, key_hex = stored.split(PASSWORD_HASH_DELIMITER)
        if not salt_hex or not key_hex:
            raise MalformedPasswordHash("Formato de hash de contraseña no válido.")
        try:
            salt = hex_decode(salt_hex, field="salt")
            derived_key = hex_decode(key_hex, field="derived_key")
        except InvalidInput:
            raise MalformedPasswordHash("Formato de hash de contraseña no válido.") from None
        return cls(salt=salt, derived_key=derived_key)
