from __future__ import annotations
from typing import Any


class FinalizingHash:
    """Expose a `cryptography` hash/MAC context as update()/digest()."""

    __slots__ = ("_ctx",)

    def __init__(self, ctx: Any) -> None:
        self._ctx = ctx

    def update(self, data: bytes) -> None:
        self._ctx.update(data)

    def digest(self) -> bytes:
        return self._ctx.finalize()


class LowWord64:
    """64-bit view of a 128-bit Murmur3 hasher: h1, the first little-endian word."""

    __slots__ = ("_h",)

    def __init__(self, h: Any) -> None:
        self._h = h

    def update(self, data: bytes) -> None:
        self._h.update(data)

    def intdigest(self) -> int:
        return int.from_bytes(self._h.digest()[:8], "little")
