
from .adapters import AdapterShape, digest_once, format_digest, run_body
from .errors import ConstructionError, GuardFailure, HashBenchError, WriteError
from .guard import AccumulatorGuard
from .interfaces import (
    Hash32,
    Hash64,
    HashFactory,
    KeyedFactory,
    SeededFactory,
    StreamingHash,
    UnkeyedFactory,
)
from .metrics import BenchmarkResult, Measurement
from .registry import Case, registry
from .runner import run_case, run_cases

__all__ = [
    "AdapterShape",
    "digest_once",
    "format_digest",
    "run_body",
    "ConstructionError",
    "GuardFailure",
    "HashBenchError",
    "WriteError",
    "AccumulatorGuard",
    "Hash32",
    "Hash64",
    "HashFactory",
    "KeyedFactory",
    "SeededFactory",
    "StreamingHash",
    "UnkeyedFactory",
    "BenchmarkResult",
    "Measurement",
    "Case",
    "registry",
    "run_case",
    "run_cases",
]
