"""
secure_variable.variable
------------------------
Defines SecureVariable, a self-describing container for one serialized value.

Envelope layout (the exported / persisted form):

    [flag: 1 byte][payload: 0..N bytes]

flag == 1 -> payload is ciphertext, anything else -> payload is UTF-8 JSON.
The cipher identifier is not stored in the envelope; importers must supply
it again when it differs from DEFAULT_ALGORITHM.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, TypeVar, Union
import binascii

from . import codec, crypto
from .constants import DEFAULT_ALGORITHM, HEADER_SIZE
from .errors import FormatError, MissingCredentialError
from .header import SecureVariableHeader, create_header, parse_header
from .logger import get_logger
from .utils import b64d, b64e, b64e_optional

log = get_logger("SecureVariable")

T = TypeVar("T")

Replacer = Callable[[T], Any]
Reviver = Callable[[Any], T]
Password = Union[str, bytes, bytearray]


def _uses_encryption(password: Optional[Password]) -> bool:
    if password is None:
        return False
    if not isinstance(password, (str, bytes, bytearray)):
        raise TypeError(f"password must be str or bytes, not {type(password).__name__}")
    return len(password) > 0


@dataclass
class SecureVariableDetail(Generic[T]):
    """Every stage of a single read, recomputed on each call."""
    header: SecureVariableHeader
    encrypted: Optional[bytes]   # raw ciphertext, None for plaintext envelopes
    encoded: bytes               # UTF-8 JSON after decryption
    decoded: T

    def to_dict(self) -> Dict[str, Any]:
        return {
            "header": self.header.to_dict(),
            "encrypted": b64e_optional(self.encrypted),
            "encoded": b64e(self.encoded),
            "decoded": self.decoded,
        }


class SecureVariable(Generic[T]):
    """
    Container holding one value as an envelope buffer.

    Built either from a value (encoded, and encrypted when a password is
    given, right away) or from raw envelope bytes (taken as-is; problems
    with the buffer surface on read/get).
    """

    def __init__(
        self,
        value: Union[T, bytes, bytearray],
        password: Optional[Password] = None,
        transform: Optional[Replacer] = None,
        algorithm: Optional[str] = None,
    ):
        if algorithm is not None:
            crypto.resolve_algorithm(algorithm)
        self.algorithm = algorithm
        self._data = b""

        if isinstance(value, (bytes, bytearray)):
            self._data = bytes(value)
        else:
            self.set(value, password, transform)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(algorithm={self.effective_algorithm!r}, "
            f"encrypted={self.is_encrypted}, size={len(self._data)})"
        )

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def effective_algorithm(self) -> str:
        return self.algorithm or DEFAULT_ALGORITHM

    @property
    def is_empty(self) -> bool:
        return len(self._data) < HEADER_SIZE

    @property
    def is_encrypted(self) -> bool:
        if self.is_empty:
            return False
        return parse_header(self._data).encrypted

    @property
    def raw_data(self) -> bytes:
        return self._data

    # ------------------------------------------------------------------
    # Set / read
    # ------------------------------------------------------------------
    def set(
        self,
        value: T,
        password: Optional[Password] = None,
        transform: Optional[Replacer] = None,
    ) -> "SecureVariable[T]":
        """
        Replace the buffer with a freshly encoded value. A non-empty password
        encrypts the payload and marks the header; otherwise it is stored as
        plaintext JSON. Returns self so calls can be chained.
        """
        data = self._encode(value, transform)
        encrypted = _uses_encryption(password)

        if encrypted:
            data = self._encrypt(data, password)

        self._data = create_header(encrypted) + data
        log.debug(f"[SET] encrypted={encrypted} | algorithm={self.effective_algorithm} | size={len(self._data)}")
        return self

    def get(self, password: Optional[Password] = None, transform: Optional[Reviver] = None) -> T:
        return self.read(password, transform).decoded

    def read(
        self,
        password: Optional[Password] = None,
        transform: Optional[Reviver] = None,
    ) -> SecureVariableDetail[T]:
        """
        Decode the buffer and return every intermediate stage.

        Raises FormatError on an empty buffer and MissingCredentialError
        when the payload is encrypted and no password is given.
        """
        if self.is_empty:
            raise FormatError("Buffer is empty.")

        header = parse_header(self._data)
        payload = self._data[HEADER_SIZE:]

        if header.encrypted:
            if not _uses_encryption(password):
                raise MissingCredentialError("Data is encrypted and requires a password.")
            encrypted: Optional[bytes] = payload
            encoded = self._decrypt(payload, password)
        else:
            encrypted = None
            encoded = payload

        decoded = self._decode(encoded, transform)
        log.debug(f"[READ] encrypted={header.encrypted} | algorithm={self.effective_algorithm} | size={len(self._data)}")
        return SecureVariableDetail(header=header, encrypted=encrypted, encoded=encoded, decoded=decoded)

    # ------------------------------------------------------------------
    # Overridable stages
    # ------------------------------------------------------------------
    def _encode(self, value: T, transform: Optional[Replacer] = None) -> bytes:
        return codec.encode(value, transform)

    def _decode(self, encoded: bytes, transform: Optional[Reviver] = None) -> T:
        return codec.decode(encoded, transform)

    def _encrypt(self, data: bytes, password: Password) -> bytes:
        return crypto.encrypt(data, password, self.algorithm)

    def _decrypt(self, data: bytes, password: Password) -> bytes:
        return crypto.decrypt(data, password, self.algorithm)

    # ------------------------------------------------------------------
    # Export / import
    # ------------------------------------------------------------------
    def to_bytes(self) -> bytes:
        """The envelope buffer itself is the wire format."""
        return self._data

    def to_base64(self) -> str:
        return b64e(self._data)

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray], algorithm: Optional[str] = None) -> "SecureVariable[Any]":
        log.debug(f"[IMPORT] algorithm={algorithm or DEFAULT_ALGORITHM} | size={len(data)}")
        return cls(bytes(data), algorithm=algorithm)

    @classmethod
    def from_base64(cls, text: str, algorithm: Optional[str] = None) -> "SecureVariable[Any]":
        try:
            data = b64d(text)
        except (binascii.Error, ValueError) as exc:
            raise FormatError(f"Invalid base64 envelope: {exc}") from exc
        return cls.from_bytes(data, algorithm)


def import_variable(data: Union[bytes, bytearray], algorithm: Optional[str] = None) -> SecureVariable[Any]:
    """Build a container straight from an exported envelope buffer."""
    return SecureVariable.from_bytes(data, algorithm)
