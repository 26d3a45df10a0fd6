# secure_variable/errors.py
from __future__ import annotations


class SecureVariableError(Exception):
    pass


class FormatError(SecureVariableError, ValueError):
    """Buffer is too short to hold a header (or the container is empty)."""


class MissingCredentialError(SecureVariableError):
    """Header says the payload is encrypted but no password was supplied."""


class CryptographicError(SecureVariableError):
    """Decryption failed: wrong password/algorithm or corrupted ciphertext."""


class SerializationError(SecureVariableError, ValueError):
    pass


class UnknownAlgorithmError(SecureVariableError, ValueError):
    def __init__(self, algorithm: str):
        super().__init__(f"Unknown cipher algorithm: {algorithm!r}")
        self.algorithm = algorithm
