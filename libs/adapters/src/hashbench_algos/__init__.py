"""Case bindings against real hash libraries.

Importing submodules registers one Case per (algorithm, shape) into
`hashbench.registry`.
"""

# Trigger registration side-effects
from . import digests as _digests  # noqa: F401
from . import fast as _fast  # noqa: F401
from . import keyed as _keyed  # noqa: F401

__all__: list[str] = []
