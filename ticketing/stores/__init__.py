from ticketing.stores.interfaces import RegistryStore
from ticketing.stores.memory_store import InMemoryRegistryStore

__all__ = ["RegistryStore", "InMemoryRegistryStore"]
