from __future__ import annotations

"""Environment-driven settings.

Every value can be overridden per process through an environment variable;
the CLI passes explicit values on top of these defaults.
"""

import os

DEFAULT_BUFFER_SIZE = 8
DEFAULT_BENCHTIME = 1.0
DEFAULT_MAX_ITERATIONS = 1_000_000_000
DEFAULT_SEED = 1471


def _env_int(var: str, default: int, *, minimum: int | None = None) -> int:
    override = os.getenv(var)
    if not override:
        return default
    try:
        value = int(override)
    except ValueError as exc:
        raise ValueError(f"{var} must be an integer") from exc
    if minimum is not None and value < minimum:
        raise ValueError(f"{var} must be >= {minimum}")
    return value


def buffer_size() -> int:
    """Length in bytes of the shared input buffer (HASHBENCH_BUFFER_SIZE)."""
    return _env_int("HASHBENCH_BUFFER_SIZE", DEFAULT_BUFFER_SIZE, minimum=1)


def benchtime() -> float:
    """Target duration of a calibrated round in seconds (HASHBENCH_BENCHTIME)."""
    override = os.getenv("HASHBENCH_BENCHTIME")
    if not override:
        return DEFAULT_BENCHTIME
    try:
        value = float(override)
    except ValueError as exc:
        raise ValueError("HASHBENCH_BENCHTIME must be a number of seconds") from exc
    if value <= 0:
        raise ValueError("HASHBENCH_BENCHTIME must be > 0")
    return value


def max_iterations() -> int:
    return _env_int("HASHBENCH_MAX_ITERATIONS", DEFAULT_MAX_ITERATIONS, minimum=1)


def seed() -> int:
    """Seed handed to seeded constructors (HASHBENCH_SEED)."""
    return _env_int("HASHBENCH_SEED", DEFAULT_SEED, minimum=0)
