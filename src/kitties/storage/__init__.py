"""Storage backends and id allocation."""

from kitties.storage.allocator import IdAllocator
from kitties.storage.local import LocalStore
from kitties.storage.models import OwnedKitty
from kitties.storage.protocol import Store

__all__ = [
    "Store",
    "LocalStore",
    "OwnedKitty",
    "IdAllocator",
]
