"""
secure_variable.crypto
----------------------
Password-keyed symmetric cipher adapter.

Key and IV are derived with OpenSSL's legacy EVP_BytesToKey convention
(MD5, one round, no salt), so the same (algorithm, password) pair always
yields the same key material. Buffers stay byte-compatible with other
"password cipher" implementations built on OpenSSL.

- resolve_algorithm(): map an identifier to a CipherSpec
- derive_key_iv(): EVP_BytesToKey for that spec
- encrypt() / decrypt(): one-shot update+finalize over the whole payload
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple, Union
import hashlib

from cryptography.hazmat.decrepit.ciphers import algorithms as decrepit_algorithms
from cryptography.hazmat.decrepit.ciphers import modes as decrepit_modes
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import BlockCipherAlgorithm, Cipher, algorithms, modes

from .constants import DEFAULT_ALGORITHM
from .errors import CryptographicError, UnknownAlgorithmError
from .logger import get_logger

log = get_logger("SecureVariable.Crypto")

Password = Union[str, bytes, bytearray]


@dataclass(frozen=True)
class CipherSpec:
    name: str
    key_size: int            # bytes
    iv_size: int             # bytes
    block_size: int          # bits, used for PKCS#7
    padded: bool
    algorithm: Callable[[bytes], BlockCipherAlgorithm]
    mode: Callable[[bytes], modes.Mode]

    def cipher(self, key: bytes, iv: bytes) -> Cipher:
        return Cipher(self.algorithm(key), self.mode(iv))


# --------- Registry ----------
_REGISTRY: Dict[str, CipherSpec] = {}
_ALIASES = {
    "aes128": "aes-128-cbc",
    "aes192": "aes-192-cbc",
    "aes256": "aes-256-cbc",
}


def _register(family: str, algorithm, bits: int, mode_name: str, mode, padded: bool) -> None:
    name = f"{family}-{bits}-{mode_name}"
    _REGISTRY[name] = CipherSpec(
        name=name,
        key_size=bits // 8,
        iv_size=16,
        block_size=128,
        padded=padded,
        algorithm=algorithm,
        mode=mode,
    )


for _bits in (128, 192, 256):
    _register("aes", algorithms.AES, _bits, "cbc", modes.CBC, padded=True)
    _register("aes", algorithms.AES, _bits, "cfb", decrepit_modes.CFB, padded=False)
    _register("aes", algorithms.AES, _bits, "ofb", decrepit_modes.OFB, padded=False)
    _register("aes", algorithms.AES, _bits, "ctr", modes.CTR, padded=False)
    _register("camellia", decrepit_algorithms.Camellia, _bits, "cbc", modes.CBC, padded=True)


def supported_algorithms() -> List[str]:
    return sorted(_REGISTRY)


def resolve_algorithm(algorithm: Optional[str] = None) -> CipherSpec:
    """Look up a cipher by identifier; ``None`` selects DEFAULT_ALGORITHM."""
    if algorithm is None:
        algorithm = DEFAULT_ALGORITHM
    if not isinstance(algorithm, str):
        raise UnknownAlgorithmError(repr(algorithm))

    name = algorithm.strip().lower()
    name = _ALIASES.get(name, name)
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownAlgorithmError(algorithm) from None


# --------- Key derivation ----------
def _password_bytes(password: Password) -> bytes:
    if isinstance(password, (bytes, bytearray)):
        return bytes(password)
    if isinstance(password, str):
        return password.encode("utf-8")
    raise TypeError(f"password must be str or bytes, not {type(password).__name__}")


def evp_bytes_to_key(password: bytes, key_size: int, iv_size: int) -> Tuple[bytes, bytes]:
    material = b""
    block = b""
    while len(material) < key_size + iv_size:
        block = hashlib.md5(block + password).digest()
        material += block
    return material[:key_size], material[key_size:key_size + iv_size]


def derive_key_iv(password: Password, algorithm: Optional[str] = None) -> Tuple[bytes, bytes]:
    spec = resolve_algorithm(algorithm)
    return evp_bytes_to_key(_password_bytes(password), spec.key_size, spec.iv_size)


# --------- Encrypt / decrypt ----------
def encrypt(data: bytes, password: Password, algorithm: Optional[str] = None) -> bytes:
    spec = resolve_algorithm(algorithm)
    key, iv = evp_bytes_to_key(_password_bytes(password), spec.key_size, spec.iv_size)

    if spec.padded:
        padder = padding.PKCS7(spec.block_size).padder()
        data = padder.update(bytes(data)) + padder.finalize()

    encryptor = spec.cipher(key, iv).encryptor()
    return encryptor.update(bytes(data)) + encryptor.finalize()


def decrypt(data: bytes, password: Password, algorithm: Optional[str] = None) -> bytes:
    spec = resolve_algorithm(algorithm)
    key, iv = evp_bytes_to_key(_password_bytes(password), spec.key_size, spec.iv_size)

    try:
        decryptor = spec.cipher(key, iv).decryptor()
        plaintext = decryptor.update(bytes(data)) + decryptor.finalize()

        if spec.padded:
            unpadder = padding.PKCS7(spec.block_size).unpadder()
            plaintext = unpadder.update(plaintext) + unpadder.finalize()
    except ValueError as exc:
        log.warning(f"[DECRYPT] failed | algorithm={spec.name} | size={len(data)}")
        raise CryptographicError(f"Unable to decrypt payload with {spec.name}: {exc}") from exc

    return plaintext
