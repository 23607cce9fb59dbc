"""
Key-Value Stores

Durable key-value collaborators consumed by the stats service. Each exposes
get(key) returning None when absent, and set(key, value).
"""

import copy
from typing import Any, Dict, Optional

from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi


class InMemoryKeyValueStore:
    """Process-local store, used when no database is configured and in tests."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Any:
        return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)


class MongoKeyValueStore:
    """
    MongoDB-backed store keeping one document per key:
    {"_id": key, "value": value}
    """

    def __init__(self, collection):
        self.collection = collection

    @classmethod
    def connect(cls, mongo_uri: str, db_name: str, collection_name: str) -> "MongoKeyValueStore":
        """
        Opens a MongoDB connection and verifies it with a ping.

        Args:
            mongo_uri: MongoDB connection string
            db_name: Database holding the stats collection
            collection_name: Collection used for the key documents
        """
        client = MongoClient(mongo_uri, server_api=ServerApi('1'))
        client.admin.command('ping')
        return cls(client[db_name][collection_name])

    def get(self, key: str) -> Any:
        document = self.collection.find_one({"_id": key})
        if document is None:
            return None
        return document.get("value")

    def set(self, key: str, value: Any) -> None:
        self.collection.update_one({"_id": key}, {"$set": {"value": value}}, upsert=True)
