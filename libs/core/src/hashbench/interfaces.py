from __future__ import annotations
"""Hash collaborator interfaces used by adapters.

Case bindings hand the registry constructors that return objects satisfying
one of these Protocols. Adapters interact only with these interfaces, never
with vendor libraries directly.
"""

from typing import Callable, Protocol, Union

class StreamingHash(Protocol):
    """Arbitrary-length byte digest (hashlib style)."""
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...

class Hash64(Protocol):
    """Fixed 64-bit integer digest."""
    def update(self, data: bytes) -> None: ...
    def intdigest(self) -> int: ...

class Hash32(Protocol):
    """Fixed 32-bit integer digest."""
    def update(self, data: bytes) -> None: ...
    def intdigest(self) -> int: ...


# Unkeyed, unkeyed-64 and truncated shapes call the constructor with no arguments.
UnkeyedFactory = Callable[[], Union[StreamingHash, Hash64]]
# Seeded shapes pass the case seed (already reduced to 32 bits for Hash32).
SeededFactory = Callable[[int], Union[Hash64, Hash32]]
# Keyed shapes pass a key of the case's key_size; the constructor may raise.
KeyedFactory = Callable[[bytes], Union[StreamingHash, Hash64]]
HashFactory = Union[UnkeyedFactory, SeededFactory, KeyedFactory]
