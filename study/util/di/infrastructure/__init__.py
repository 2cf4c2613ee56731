"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .realtime import RealtimeProvider
from .storage import StorageProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .storage import ProdStorageProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
    "RealtimeProvider",
    "StorageProvider",
]
