from __future__ import annotations
import functools
import hashlib

import blake3
from Crypto.Hash import RIPEMD160
from cryptography.hazmat.primitives import hashes

from typing import Tuple

from hashbench import AdapterShape, UnkeyedFactory, registry

from ._util import FinalizingHash


def _sm3() -> FinalizingHash:
    return FinalizingHash(hashes.Hash(hashes.SM3()))


CRYPTO_CASES: Tuple[Tuple[str, UnkeyedFactory, str], ...] = (
    ("md5", hashlib.md5, "MD5 (hashlib)"),
    ("sha1", hashlib.sha1, "SHA-1 (hashlib)"),
    ("sha256", hashlib.sha256, "SHA-256 (hashlib)"),
    ("sha3-224", hashlib.sha3_224, "SHA3-224 (hashlib)"),
    ("sha3-256", hashlib.sha3_256, "SHA3-256 (hashlib)"),
    ("ripemd160", RIPEMD160.new, "RIPEMD-160 (pycryptodome)"),
    ("blake2b-256", functools.partial(hashlib.blake2b, digest_size=32), "BLAKE2b, 256-bit output (hashlib)"),
    ("blake3", blake3.blake3, "BLAKE3, 256-bit output"),
    ("sm3", _sm3, "SM3 (cryptography)"),
)

for _name, _factory, _desc in CRYPTO_CASES:
    registry.case(_name, AdapterShape.UNKEYED, _factory, family="crypto", description=_desc)
