from venue_ops.storage.memory_store import InMemoryStore

__all__ = ["InMemoryStore"]
