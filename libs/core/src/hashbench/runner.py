from __future__ import annotations
"""Calibrated timing loop for registered Cases.

The runner holds no hashing logic. It allocates the shared zero buffer once
per Case, hands it to the Case's adapter body for a growing number of
iterations until one round lasts at least `benchtime`, and reports the last
round. Each round owns a fresh AccumulatorGuard that is checked when the
round ends.
"""

import logging
import random
import time
from typing import Callable, Iterable, List, Optional, Tuple

from . import config
from .adapters import run_body
from .environment import collect_environment_meta
from .errors import GuardFailure
from .guard import AccumulatorGuard
from .metrics import BenchmarkResult, Measurement
from .registry import Case

log = logging.getLogger(__name__)

_MAX_GROWTH = 100


def run_round(case: Case, data: bytes, iterations: int) -> Tuple[float, int]:
    """Time `iterations` of the case body; return (elapsed seconds, guard value)."""
    guard = AccumulatorGuard(case.name)
    start = time.perf_counter()
    run_body(case, data, iterations, guard)
    elapsed = time.perf_counter() - start
    return elapsed, guard.check()


def predict_iterations(goal: float, last: int, elapsed: float, limit: int) -> int:
    """Next iteration count for a round, following the `go test` growth rule."""
    if elapsed <= 0:
        n = last * _MAX_GROWTH
    else:
        n = int(goal * last / elapsed)
        # overshoot by 20% so the next round is likely long enough
        n += n // 5
    n = min(n, last * _MAX_GROWTH)
    n = max(n, last + 1)
    return min(n, limit)


def run_case(
    case: Case,
    *,
    benchtime: float | None = None,
    iterations: int | None = None,
    max_iterations: int | None = None,
) -> Measurement:
    """Benchmark one Case.

    With `iterations` the count is fixed and a single round runs. Otherwise
    the count is calibrated against `benchtime` seconds. A guard failure
    yields a failed Measurement; WriteError and ConstructionError propagate.
    """
    goal = config.benchtime() if benchtime is None else benchtime
    limit = config.max_iterations() if max_iterations is None else max_iterations
    data = bytes(case.length)

    n = 1 if iterations is None else iterations
    if n <= 0:
        raise ValueError("iterations must be > 0")
    rounds = 0
    try:
        while True:
            elapsed, guard_value = run_round(case, data, n)
            rounds += 1
            log.debug("%s: round %d ran %d iterations in %.6fs", case.name, rounds, n, elapsed)
            if iterations is not None or elapsed >= goal or n >= limit:
                break
            n = predict_iterations(goal, n, elapsed, limit)
    except GuardFailure as exc:
        log.warning("%s", exc)
        return Measurement(
            case=case.name,
            shape=case.shape.value,
            family=case.family,
            description=case.description,
            iterations=n,
            bytes_per_op=case.length,
            elapsed_s=0.0,
            rounds=rounds + 1,
            failed=True,
            error=str(exc),
        )
    return Measurement(
        case=case.name,
        shape=case.shape.value,
        family=case.family,
        description=case.description,
        iterations=n,
        bytes_per_op=case.length,
        elapsed_s=elapsed,
        guard_value=guard_value,
        rounds=rounds,
    )


def run_cases(
    cases: Iterable[Case],
    *,
    benchtime: float | None = None,
    iterations: int | None = None,
    max_iterations: int | None = None,
    shuffle: bool = False,
    seed: int | None = None,
    progress: Optional[Callable[[Measurement], None]] = None,
    notes: str = "",
) -> BenchmarkResult:
    """Run Cases one at a time, in order or shuffled.

    Measurements are returned in execution order. A Case that fails its guard
    does not stop its siblings; fatal errors abort the whole run.
    """
    ordered: List[Case] = list(cases)
    if shuffle:
        random.Random(seed).shuffle(ordered)
    measurements: List[Measurement] = []
    for case in ordered:
        m = run_case(
            case,
            benchtime=benchtime,
            iterations=iterations,
            max_iterations=max_iterations,
        )
        if not m.failed:
            log.info("%s: %d iterations, %.2f ns/op, %.2f MB/s", m.case, m.iterations, m.ns_per_op, m.mb_per_s)
        measurements.append(m)
        if progress is not None:
            progress(m)
    meta = {
        "order": [c.name for c in ordered],
        "shuffled": shuffle,
        "environment": collect_environment_meta(),
    }
    if shuffle and seed is not None:
        meta["shuffle_seed"] = seed
    return BenchmarkResult(measurements=measurements, notes=notes, meta=meta)
