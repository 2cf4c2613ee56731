"""Test doubles for mockable DI components.

Importing this package registers the mock providers as subclasses of their
component bases, which is what lets the container select them.
"""

from .container import build_test_container
from .persistence import MockPersistenceProvider
from .storage import MockStorageProvider

__all__ = [
    "MockPersistenceProvider",
    "MockStorageProvider",
    "build_test_container",
]
