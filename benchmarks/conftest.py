from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

for candidate in (
    ROOT / "libs" / "core" / "src",
    ROOT / "libs" / "adapters" / "src",
):
    if str(candidate) not in sys.path:
        sys.path.insert(0, str(candidate))
