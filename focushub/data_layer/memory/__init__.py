from focushub.data_layer.memory.store import MemoryStore, DEFAULT_COLLECTIONS

__all__ = [
    'MemoryStore',
    'DEFAULT_COLLECTIONS',
]
