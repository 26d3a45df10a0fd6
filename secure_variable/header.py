"""
secure_variable.header
----------------------
Reads and writes the one-byte envelope header.

Only the literal value ``1`` (read as a signed byte) marks a payload as
encrypted; every other value, including ``0xff`` (-1), is plaintext.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Union
import struct

from .constants import HEADER_SIZE, ENCRYPTED_FLAG, PLAINTEXT_FLAG
from .errors import FormatError

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class SecureVariableHeader:
    encrypted: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def create_header(encrypted: bool) -> bytes:
    return struct.pack("B", ENCRYPTED_FLAG if encrypted else PLAINTEXT_FLAG)


def parse_header(buf: BytesLike, offset: int = 0) -> SecureVariableHeader:
    if offset < 0 or len(buf) - offset < HEADER_SIZE:
        raise FormatError("Buffer has invalid size.")

    (flag,) = struct.unpack_from("b", buf, offset)
    return SecureVariableHeader(encrypted=flag == ENCRYPTED_FLAG)


# Name used by the original container API.
get_header = parse_header
