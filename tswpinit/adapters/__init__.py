"""Adapters — bindings for the external tools a scaffold run drives.

Public re-exports for convenient access.
"""

from tswpinit.adapters.base import Adapter, ExecutionContext
from tswpinit.adapters.mock import MockAdapter
from tswpinit.adapters.registry import AdapterRegistry, default_registry

__all__ = [
    "Adapter",
    "AdapterRegistry",
    "ExecutionContext",
    "MockAdapter",
    "default_registry",
]
