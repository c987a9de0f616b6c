"""
Stockage des elements de la videotheque.

- memory_repository : Repository en memoire (sans schema de persistance)
"""

from featurette.adapters.persistence.memory_repository import InMemoryItemRepository

__all__ = ["InMemoryItemRepository"]
