from __future__ import annotations
"""Execution shapes that normalize hash library calling conventions.

Every shape runs the same per-iteration contract: construct a fresh hash
instance, write the whole shared buffer in one call, extract the digest and
fold a slice of it into the run's AccumulatorGuard. Construction is timed on
purpose; short-lived hashing of small keys pays it on every call.

Bodies return the digest of the last iteration so callers can compare
results across runs.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from .errors import ConstructionError, WriteError
from .guard import AccumulatorGuard

if TYPE_CHECKING:
    from .registry import Case


class AdapterShape(str, Enum):
    UNKEYED = "unkeyed"
    UNKEYED_64 = "unkeyed-64"
    SEEDED_64 = "seeded-64"
    SEEDED_32 = "seeded-32"
    KEYED_FALLIBLE = "keyed-fallible"
    KEYED_64_FALLIBLE = "keyed-64-fallible"
    TRUNCATED = "truncated"

    @property
    def keyed(self) -> bool:
        return self in (AdapterShape.KEYED_FALLIBLE, AdapterShape.KEYED_64_FALLIBLE)

    @property
    def seeded(self) -> bool:
        return self in (AdapterShape.SEEDED_64, AdapterShape.SEEDED_32)


Body = Callable[["Case", bytes, int, AccumulatorGuard], Any]


def _construct(case: "Case", *args: Any):
    # A constructor that raises (wrong key material, algorithm missing from
    # the linked library) aborts the run; no unchecked instance is used.
    try:
        return case.factory(*args)
    except Exception as exc:
        raise ConstructionError(case.name, exc) from exc


def run_unkeyed(case: "Case", data: bytes, iterations: int, guard: AccumulatorGuard) -> bytes:
    digest = b""
    for _ in range(iterations):
        h = _construct(case)
        try:
            h.update(data)
        except Exception as exc:
            raise WriteError(case.name, exc) from exc
        digest = h.digest()
        guard.add(digest[0])
    return digest


def run_unkeyed64(case: "Case", data: bytes, iterations: int, guard: AccumulatorGuard) -> int:
    value = 0
    for _ in range(iterations):
        h = _construct(case)
        try:
            h.update(data)
        except Exception as exc:
            raise WriteError(case.name, exc) from exc
        value = h.intdigest()
        guard.add(value)
    return value


def run_seeded64(case: "Case", data: bytes, iterations: int, guard: AccumulatorGuard) -> int:
    seed = case.seed
    value = 0
    for _ in range(iterations):
        h = _construct(case, seed)
        try:
            h.update(data)
        except Exception as exc:
            raise WriteError(case.name, exc) from exc
        value = h.intdigest()
        guard.add(value)
    return value


def run_seeded32(case: "Case", data: bytes, iterations: int, guard: AccumulatorGuard) -> int:
    seed = case.seed & 0xFFFFFFFF
    value = 0
    for _ in range(iterations):
        h = _construct(case, seed)
        try:
            h.update(data)
        except Exception as exc:
            raise WriteError(case.name, exc) from exc
        value = h.intdigest()
        guard.add(value)
    return value


def run_keyed(case: "Case", data: bytes, iterations: int, guard: AccumulatorGuard) -> bytes:
    key = bytes(case.key_size)
    digest = b""
    for _ in range(iterations):
        h = _construct(case, key)
        try:
            h.update(data)
        except Exception as exc:
            raise WriteError(case.name, exc) from exc
        digest = h.digest()
        guard.add(digest[0])
    return digest


def run_keyed64(case: "Case", data: bytes, iterations: int, guard: AccumulatorGuard) -> int:
    key = bytes(case.key_size)
    value = 0
    for _ in range(iterations):
        h = _construct(case, key)
        try:
            h.update(data)
        except Exception as exc:
            raise WriteError(case.name, exc) from exc
        value = h.intdigest()
        guard.add(value)
    return value


def run_truncated(case: "Case", data: bytes, iterations: int, guard: AccumulatorGuard) -> bytes:
    """Narrow a 64-bit digest to its top `width_bits` without re-hashing."""
    shifts = tuple(range(56, 56 - case.width_bits, -8))
    out = b""
    for _ in range(iterations):
        h = _construct(case)
        try:
            h.update(data)
        except Exception as exc:
            raise WriteError(case.name, exc) from exc
        s = h.intdigest()
        # fresh scratch buffer per iteration
        out = bytes([(s >> shift) & 0xFF for shift in shifts])
        guard.add(int.from_bytes(out, "big"))
    return out


BODIES: Dict[AdapterShape, Body] = {
    AdapterShape.UNKEYED: run_unkeyed,
    AdapterShape.UNKEYED_64: run_unkeyed64,
    AdapterShape.SEEDED_64: run_seeded64,
    AdapterShape.SEEDED_32: run_seeded32,
    AdapterShape.KEYED_FALLIBLE: run_keyed,
    AdapterShape.KEYED_64_FALLIBLE: run_keyed64,
    AdapterShape.TRUNCATED: run_truncated,
}


def run_body(case: "Case", data: bytes, iterations: int, guard: AccumulatorGuard) -> Any:
    return BODIES[case.shape](case, data, iterations, guard)


def digest_once(case: "Case", data: Optional[bytes] = None) -> Any:
    """Run a single iteration of `case` and return its digest.

    Uses a zero buffer of the case length when `data` is omitted. The guard
    is throwaway and never checked.
    """
    if data is None:
        data = bytes(case.length)
    return run_body(case, data, 1, AccumulatorGuard(case.name))


def format_digest(digest: Any, shape: AdapterShape) -> str:
    if isinstance(digest, (bytes, bytearray)):
        return bytes(digest).hex()
    if shape is AdapterShape.SEEDED_32:
        return f"0x{digest:08x}"
    return f"0x{digest:016x}"
