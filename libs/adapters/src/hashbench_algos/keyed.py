from __future__ import annotations
import hashlib
from typing import Tuple

import blake3
import siphash24
from cryptography.hazmat.primitives import hashes, hmac

from hashbench import AdapterShape, Hash64, KeyedFactory, StreamingHash, registry

from ._util import FinalizingHash

SIPHASH_KEY_SIZE = 16


def blake2b_256_keyed(key: bytes) -> StreamingHash:
    return hashlib.blake2b(key=key, digest_size=32)


def blake3_keyed(key: bytes) -> StreamingHash:
    return blake3.blake3(key=key)


def hmac_sha256(key: bytes) -> FinalizingHash:
    return FinalizingHash(hmac.HMAC(key, hashes.SHA256()))


def siphash_2_4(key: bytes) -> Hash64:
    if len(key) != SIPHASH_KEY_SIZE:
        raise ValueError(f"SipHash key must be {SIPHASH_KEY_SIZE} bytes, got {len(key)}")
    return siphash24.siphash24(key=key)


KEYED_CASES: Tuple[Tuple[str, AdapterShape, KeyedFactory, int, str], ...] = (
    ("blake2b-256-keyed", AdapterShape.KEYED_FALLIBLE, blake2b_256_keyed, 16,
     "keyed BLAKE2b, 256-bit output (hashlib)"),
    ("blake3-keyed", AdapterShape.KEYED_FALLIBLE, blake3_keyed, 32, "BLAKE3 keyed mode (blake3)"),
    ("hmac-sha256", AdapterShape.KEYED_FALLIBLE, hmac_sha256, 16, "HMAC-SHA-256 (cryptography)"),
    ("siphash-2-4", AdapterShape.KEYED_64_FALLIBLE, siphash_2_4, SIPHASH_KEY_SIZE,
     "SipHash-2-4 (siphash24)"),
)

for _name, _shape, _factory, _key_size, _desc in KEYED_CASES:
    registry.case(_name, _shape, _factory, key_size=_key_size, family="mac", description=_desc)
