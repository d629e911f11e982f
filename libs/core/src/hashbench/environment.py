from __future__ import annotations
"""Host description attached to exported results."""

import copy
import platform
import subprocess
from importlib import metadata
from pathlib import Path
from typing import Any, Dict

import psutil

_ENVIRONMENT_CACHE: Dict[str, Any] | None = None

HASH_DISTRIBUTIONS = (
    "xxhash",
    "mmh3",
    "blake3",
    "siphash24",
    "pycryptodome",
    "cryptography",
)


def _detect_cpu_model() -> str | None:
    system = platform.system()
    try:
        if system == "Darwin":
            out = subprocess.check_output(
                ["sysctl", "-n", "machdep.cpu.brand_string"],
                stderr=subprocess.DEVNULL,
                text=True,
            ).strip()
            if out:
                return out
        elif system == "Linux":
            cpuinfo = Path("/proc/cpuinfo")
            if cpuinfo.exists():
                for line in cpuinfo.read_text(encoding="utf-8", errors="ignore").splitlines():
                    if line.lower().startswith("model name"):
                        return line.split(":", 1)[1].strip()
    except (OSError, subprocess.SubprocessError):
        pass
    return platform.processor() or platform.machine() or None


def _library_versions() -> Dict[str, str]:
    versions: Dict[str, str] = {}
    for dist in HASH_DISTRIBUTIONS:
        try:
            versions[dist] = metadata.version(dist)
        except metadata.PackageNotFoundError:
            continue
    return versions


def collect_environment_meta() -> Dict[str, Any]:
    global _ENVIRONMENT_CACHE
    if _ENVIRONMENT_CACHE is None:
        info: Dict[str, Any] = {}
        cpu_model = _detect_cpu_model()
        if cpu_model:
            info["cpu_model"] = cpu_model
        info["cpu_count"] = psutil.cpu_count(logical=True)
        try:
            freq = psutil.cpu_freq()
        except (NotImplementedError, OSError):
            freq = None
        if freq is not None:
            info["cpu_freq_mhz"] = freq.current
        info["os"] = platform.platform(aliased=True)
        info["python"] = platform.python_version()
        info["implementation"] = platform.python_implementation()
        libs = _library_versions()
        if libs:
            info["libraries"] = libs
        _ENVIRONMENT_CACHE = info
    return copy.deepcopy(_ENVIRONMENT_CACHE)
