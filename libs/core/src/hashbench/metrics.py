from __future__ import annotations
"""Benchmark result containers.

A Measurement is produced per Case by the runner, reported and discarded;
BenchmarkResult groups the measurements of one invocation for export.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List

@dataclass
class Measurement:
    case: str
    shape: str
    iterations: int
    bytes_per_op: int
    elapsed_s: float
    guard_value: int = 0
    rounds: int = 1
    failed: bool = False
    error: str | None = None
    family: str = ""
    description: str = ""

    @property
    def ns_per_op(self) -> float:
        if self.iterations <= 0:
            return 0.0
        return self.elapsed_s * 1e9 / self.iterations

    @property
    def bytes_per_sec(self) -> float:
        if self.elapsed_s <= 0:
            return 0.0
        return self.iterations * self.bytes_per_op / self.elapsed_s

    @property
    def mb_per_s(self) -> float:
        return self.bytes_per_sec / 1e6

    def to_dict(self) -> Dict[str, Any]:
        return {
            "case": self.case,
            "shape": self.shape,
            "family": self.family,
            "description": self.description,
            "iterations": self.iterations,
            "bytes_per_op": self.bytes_per_op,
            "elapsed_s": self.elapsed_s,
            "ns_per_op": self.ns_per_op,
            "mb_per_s": self.mb_per_s,
            "rounds": self.rounds,
            "failed": self.failed,
            "error": self.error,
        }

@dataclass
class BenchmarkResult:
    measurements: List[Measurement]
    notes: str = ""
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def failed(self) -> List[Measurement]:
        return [m for m in self.measurements if m.failed]
