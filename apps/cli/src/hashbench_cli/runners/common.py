from __future__ import annotations
"""Shared helpers for the CLI.

Includes case-binding bootstrap, result table formatting and JSON export.
"""

import importlib
import importlib.util
import json
import pathlib
import sys
from typing import Any, Dict, List

from hashbench import BenchmarkResult, Measurement

_HERE = pathlib.Path(__file__).resolve()
_BINDINGS_MODULE = "hashbench_algos"

try:
    _PROJECT_ROOT = next(p for p in _HERE.parents if (p / "libs").exists())
except StopIteration:
    _PROJECT_ROOT = _HERE.parents[0]

_BINDINGS_PATH = _PROJECT_ROOT / "libs" / "adapters" / "src"


def _load_adapters() -> None:
    """Import the case bindings so every Case is registered."""
    if _BINDINGS_MODULE in sys.modules:
        return
    if importlib.util.find_spec(_BINDINGS_MODULE) is None and _BINDINGS_PATH.exists():
        if str(_BINDINGS_PATH) not in sys.path:
            sys.path.append(str(_BINDINGS_PATH))
    importlib.import_module(_BINDINGS_MODULE)


def format_table(measurements: List[Measurement]) -> List[str]:
    """Render measurements the way `go test -bench` lays out its lines."""
    if not measurements:
        return []
    width = max(len(m.case) for m in measurements)
    lines = []
    for m in measurements:
        if m.failed:
            lines.append(f"--- FAIL: {m.case}\n    {m.error}")
            continue
        lines.append(
            f"{m.case:<{width}}  {m.iterations:>12d}  {m.ns_per_op:>10.2f} ns/op  {m.mb_per_s:>9.2f} MB/s"
        )
    return lines


def _build_export_payload(result: BenchmarkResult) -> Dict[str, Any]:
    return {
        "measurements": [m.to_dict() for m in result.measurements],
        "failed": [m.case for m in result.failed],
        "notes": result.notes,
        "meta": result.meta,
    }


def _repo_root() -> pathlib.Path:
    """Best-effort detection of the repository root (directory containing .git).
    Falls back to the current working directory if not found.
    """
    for p in (_HERE, *_HERE.parents):
        if (p / ".git").exists():
            return p
    return pathlib.Path.cwd()


def export_json(result: BenchmarkResult, export_path: str | None) -> pathlib.Path | None:
    if not export_path:
        return None
    # Normalize Windows-style separators on POSIX if users pass e.g. "results\file.json"
    if "\\" in export_path and ":" not in export_path:
        export_path = export_path.replace("\\", "/")
    path = pathlib.Path(export_path)
    if not path.is_absolute():
        path = _repo_root() / path
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(_build_export_payload(result), f, indent=2)
    return path
