from __future__ import annotations
import mmh3
import xxhash

from hashbench import AdapterShape, Hash32, Hash64, SeededFactory, UnkeyedFactory, registry

from ._util import LowWord64


def murmur3_64() -> LowWord64:
    return LowWord64(mmh3.mmh3_x64_128(seed=0))


def xxh64_seeded(seed: int) -> Hash64:
    return xxhash.xxh64(seed=seed)


def xxh32_seeded(seed: int) -> Hash32:
    return xxhash.xxh32(seed=seed)


class _Murmur3_32:
    __slots__ = ("_h",)

    def __init__(self, seed: int) -> None:
        self._h = mmh3.mmh3_32(seed=seed)

    def update(self, data: bytes) -> None:
        self._h.update(data)

    def intdigest(self) -> int:
        return self._h.uintdigest()


murmur3_32_seeded: SeededFactory = _Murmur3_32


registry.case("murmur3-64", AdapterShape.UNKEYED_64, murmur3_64, family="fast",
              description="MurmurHash3 x64_128, low 64 bits (mmh3)")
registry.case("xxh64", AdapterShape.UNKEYED_64, xxhash.xxh64, family="fast",
              description="XXH64 (xxhash)")
registry.case("xxh3-64", AdapterShape.UNKEYED_64, xxhash.xxh3_64, family="fast",
              description="XXH3 64-bit (xxhash)")
registry.case("xxh64-seeded", AdapterShape.SEEDED_64, xxh64_seeded, family="fast",
              description="XXH64 with explicit seed (xxhash)")
registry.case("xxh32-seeded", AdapterShape.SEEDED_32, xxh32_seeded, family="fast",
              description="XXH32 with explicit seed (xxhash)")
registry.case("murmur3-32-seeded", AdapterShape.SEEDED_32, murmur3_32_seeded, family="fast",
              description="MurmurHash3 x86_32 with explicit seed (mmh3)")

TRUNCATION_SOURCE: UnkeyedFactory = xxhash.xxh64

# Marginal cost of narrowing the output width, measured on the same XXH64 instance.
for _bits in (32, 16, 8):
    registry.case(f"xxh64-to-{_bits}", AdapterShape.TRUNCATED, TRUNCATION_SOURCE, width_bits=_bits,
                  family="fast", description=f"XXH64 truncated to its top {_bits} bits")
