from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List

from . import config
from .adapters import AdapterShape
from .interfaces import HashFactory

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Case:
    """One benchmarked (algorithm, adapter shape, input length) combination."""
    name: str
    shape: AdapterShape
    factory: HashFactory
    length: int
    seed: int = config.DEFAULT_SEED
    key_size: int = 0
    width_bits: int = 64
    family: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("case name must not be empty")
        if not isinstance(self.shape, AdapterShape):
            object.__setattr__(self, "shape", AdapterShape(self.shape))
        if self.length <= 0:
            raise ValueError(f"{self.name}: input length must be > 0, got {self.length}")
        if self.shape.keyed and self.key_size <= 0:
            raise ValueError(f"{self.name}: keyed shapes need a key_size > 0")
        if self.shape is AdapterShape.TRUNCATED and self.width_bits not in (8, 16, 32):
            raise ValueError(f"{self.name}: truncation width must be 8, 16 or 32 bits")


class _Registry:
    def __init__(self) -> None:
        self._items: Dict[str, Case] = {}

    def register(self, case: Case) -> Case:
        if case.name in self._items:
            raise ValueError(f"case {case.name!r} is already registered")
        self._items[case.name] = case
        log.debug("registered case %s (%s, %d bytes)", case.name, case.shape.value, case.length)
        return case

    def case(
        self,
        name: str,
        shape: AdapterShape | str,
        factory: HashFactory,
        *,
        length: int | None = None,
        **params: Any,
    ) -> Case:
        """Build and register a Case; `length` and `seed` default to the configured values."""
        params.setdefault("seed", config.seed())
        return self.register(
            Case(
                name=name,
                shape=AdapterShape(shape),
                factory=factory,
                length=config.buffer_size() if length is None else length,
                **params,
            )
        )

    def get(self, name: str) -> Case:
        try:
            return self._items[name]
        except KeyError:
            raise KeyError(f"unknown case: {name}") from None

    def list(self) -> Dict[str, Case]:
        return dict(self._items)

    def names(self) -> List[str]:
        return list(self._items)

    def select(self, pattern: str | None = None) -> List[Case]:
        """Cases whose name matches the regular expression `pattern` (all when empty)."""
        if not pattern:
            return list(self._items.values())
        rx = re.compile(pattern)
        return [c for c in self._items.values() if rx.search(c.name)]

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __len__(self) -> int:
        return len(self._items)

registry = _Registry()
