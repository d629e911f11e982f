from __future__ import annotations

from .errors import GuardFailure

_MASK64 = (1 << 64) - 1


class AccumulatorGuard:
    """Run-scoped counter that every timed iteration folds a digest slice into.

    A loop that computes digests and drops them can be elided by an optimizing
    runtime; feeding part of each digest into an observable sum keeps the work
    live. The sum wraps like an unsigned 64-bit integer. Ending at zero means
    the run is suspect, so `check()` raises `GuardFailure`.
    """

    __slots__ = ("case", "_value")

    def __init__(self, case: str = "") -> None:
        self.case = case
        self._value = 0

    def add(self, value: int) -> None:
        self._value = (self._value + value) & _MASK64

    @property
    def value(self) -> int:
        return self._value

    def reset(self) -> None:
        self._value = 0

    def check(self) -> int:
        if self._value == 0:
            raise GuardFailure(self.case, self._value)
        return self._value

    def __repr__(self) -> str:
        return f"AccumulatorGuard(case={self.case!r}, value={self._value})"
