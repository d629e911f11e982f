from __future__ import annotations

"""Error taxonomy for benchmark runs.

WriteError and ConstructionError are fatal: they abort the whole run.
GuardFailure only marks the Case that raised it as failed.
"""


class HashBenchError(Exception):
    """Base class for harness errors."""


class WriteError(HashBenchError):
    def __init__(self, case: str, cause: BaseException) -> None:
        super().__init__(f"{case}: write into hash instance failed: {cause}")
        self.case = case
        self.cause = cause


class ConstructionError(HashBenchError):
    def __init__(self, case: str, cause: BaseException) -> None:
        super().__init__(f"{case}: hash construction failed: {cause}")
        self.case = case
        self.cause = cause


class GuardFailure(HashBenchError):
    def __init__(self, case: str, value: int = 0) -> None:
        super().__init__(
            f"{case}: accumulator ended at {value}; digest computation was probably optimized away"
        )
        self.case = case
        self.value = value
