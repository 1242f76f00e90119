# -*- coding: utf-8 -*-
"""
Data Store Factory.

Centralizes creation of the data store.
Supports switching between the hosted store and the in-memory store.
"""

from typing import Optional

from .data_store import DataStore, DataStoreType
from .http_data_store import HttpDataStore, StoreConfig
from .memory_data_store import InMemoryDataStore
from utils.logger import get_logger

logger = get_logger(__name__)


class DataStoreFactory:
    """
    Factory for creating and managing the data store.

    Singleton pattern - ensures only one store instance exists.
    """

    _instance: Optional[DataStore] = None

    @classmethod
    def create(cls, store_type: Optional[DataStoreType] = None,
               config: Optional[StoreConfig] = None) -> DataStore:
        """
        Create or return existing data store.

        Args:
            store_type: Store type. If None, read from Config.DATA_PROVIDER.
            config: HTTP store settings (ignored for the memory store)

        Returns:
            DataStore instance
        """
        if store_type is None:
            from app.config import Config
            store_type = cls.type_from_name(Config.DATA_PROVIDER)

        if cls._instance is not None:
            if cls._instance.store_type == store_type:
                return cls._instance
            cls.reset()

        logger.info(f"Creating data store: {store_type.value}")

        if store_type == DataStoreType.HTTP:
            store = HttpDataStore(config)
        elif store_type == DataStoreType.MEMORY:
            store = InMemoryDataStore()
        else:
            raise ValueError(f"Unknown store type: {store_type}")

        cls._instance = store
        return store

    @staticmethod
    def type_from_name(name: str) -> DataStoreType:
        """Map a DATA_PROVIDER setting to a store type."""
        if (name or "").lower() in ("http", "http_api", "hosted"):
            return DataStoreType.HTTP
        return DataStoreType.MEMORY

    @classmethod
    def get_instance(cls) -> DataStore:
        """Get current data store instance."""
        if cls._instance is None:
            return cls.create()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the current store."""
        cls._instance = None
