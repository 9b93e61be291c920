from .base import Implementation
from .registry import ImplementationRegistry, default_registry

__all__ = [
    "Implementation",
    "ImplementationRegistry",
    "default_registry",
]
