"""
Secure Variable
===============
A single-value container that serializes to JSON, optionally encrypts under a
password, and keeps the result in one self-describing envelope buffer.

Provides:
- SecureVariable container (set / get / read, export / import)
- Header and JSON value codecs usable without an instance
- Password-keyed cipher adapter (EVP_BytesToKey + AES/Camellia)
- Explicit configuration and structured logging helpers
"""

from .codec import ABSENT, decode, encode
from .config import SecureVariableConfig, configure_logging, load_config
from .constants import DEFAULT_ALGORITHM, HEADER_SIZE
from .crypto import decrypt, derive_key_iv, encrypt, resolve_algorithm, supported_algorithms
from .errors import (
    CryptographicError,
    FormatError,
    MissingCredentialError,
    SecureVariableError,
    SerializationError,
    UnknownAlgorithmError,
)
from .header import SecureVariableHeader, create_header, get_header, parse_header
from .variable import SecureVariable, SecureVariableDetail, import_variable

__version__ = "1.0.0"

__all__ = [
    "ABSENT",
    "DEFAULT_ALGORITHM",
    "HEADER_SIZE",
    "SecureVariable",
    "SecureVariableConfig",
    "SecureVariableDetail",
    "SecureVariableHeader",
    "SecureVariableError",
    "FormatError",
    "MissingCredentialError",
    "CryptographicError",
    "SerializationError",
    "UnknownAlgorithmError",
    "create_header",
    "parse_header",
    "get_header",
    "encode",
    "decode",
    "encrypt",
    "decrypt",
    "derive_key_iv",
    "resolve_algorithm",
    "supported_algorithms",
    "import_variable",
    "load_config",
    "configure_logging",
]
