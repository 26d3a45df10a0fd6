"""
secure_variable.utils
---------------------
Small helpers for rendering and transporting envelope bytes as text.
"""

from __future__ import annotations
import base64
from typing import Optional


def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")


def b64d(s: str) -> bytes:
    return base64.b64decode(s.encode("ascii"), validate=True)


def b64e_optional(b: Optional[bytes]) -> Optional[str]:
    return None if b is None else b64e(b)
