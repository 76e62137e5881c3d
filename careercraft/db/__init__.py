"""
Database module - MongoDB connection lifecycle and collection names.
"""
from careercraft.db.mongodb import (
    COLLECTIONS,
    connect_mongo,
    get_mongo_db,
    init_mongo_indexes,
    test_mongo_connection
)

__all__ = [
    "COLLECTIONS",
    "connect_mongo",
    "get_mongo_db",
    "init_mongo_indexes",
    "test_mongo_connection"
]
