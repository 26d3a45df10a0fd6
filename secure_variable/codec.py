"""
secure_variable.codec
---------------------
JSON value codec with caller-supplied transform hooks.

``encode`` applies the transform first and serializes the result as compact
UTF-8 JSON. A transform may return ``ABSENT`` to say "nothing to encode",
which yields zero bytes; ``decode`` maps zero bytes back to ``ABSENT``
without calling its transform.
"""

from __future__ import annotations
from typing import Any, Callable, Optional
import json

from .errors import SerializationError

Transform = Callable[[Any], Any]


class _Absent:
    """Singleton marker for "no value" (distinct from ``None`` / JSON null)."""

    _instance: Optional["_Absent"] = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()


def _identity(value: Any) -> Any:
    return value


def _reject_constant(name: str) -> Any:
    # NaN and Infinity have no JSON form
    raise ValueError(f"invalid JSON constant {name}")


def encode(value: Any, transform: Optional[Transform] = None) -> bytes:
    transformed = (transform or _identity)(value)

    if transformed is ABSENT:
        return b""

    try:
        text = json.dumps(transformed, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Value cannot be serialized: {exc}") from exc

    return text.encode("utf-8")


def decode(data: bytes, transform: Optional[Transform] = None) -> Any:
    if len(data) == 0:
        return ABSENT

    try:
        parsed = json.loads(bytes(data).decode("utf-8"), parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError) as exc:
        raise SerializationError(f"Payload is not valid serialized data: {exc}") from exc

    return (transform or _identity)(parsed)
