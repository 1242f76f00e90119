# -*- coding: utf-8 -*-
"""
iDecide Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "DataStoreFactory",
    "HttpDataStore",
    "InMemoryDataStore",
    "PersistenceAdapter",
    "BudgetService",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "DataStoreFactory":
        from .data_store_factory import DataStoreFactory
        return DataStoreFactory
    elif name == "HttpDataStore":
        from .http_data_store import HttpDataStore
        return HttpDataStore
    elif name == "InMemoryDataStore":
        from .memory_data_store import InMemoryDataStore
        return InMemoryDataStore
    elif name == "PersistenceAdapter":
        from .persistence_adapter import PersistenceAdapter
        return PersistenceAdapter
    elif name == "BudgetService":
        from .budget_service import BudgetService
        return BudgetService
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
