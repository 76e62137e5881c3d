"""
MongoDB Connection Utility

MongoDB stores:
- User accounts with embedded profile, psychometric answers
  and cached AI results (analysis / portfolio / roadmap)
- Job roles (reference data, curated outside the app)
- Scholarships (reference data, curated outside the app)

One client is opened at startup (see careercraft.main lifespan),
kept on app.state for the whole process and handed to routes
through the get_mongo_db dependency.
"""
import logging

from fastapi import Request
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

from careercraft.core.config import get_settings

logger = logging.getLogger(__name__)

# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "job_roles": "job_roles",
    "scholarships": "scholarships"
}


def connect_mongo(uri: str = None) -> MongoClient:
    """
    Open a client and ping the server.
    Raises if MongoDB is unreachable so startup fails fast.
    """
    settings = get_settings()
    client = MongoClient(uri or settings.mongodb_uri)
    try:
        client.admin.command("ping")
    except Exception:
        client.close()
        raise
    return client


def init_mongo_indexes(db: Database) -> None:
    """
    Create indexes. Safe to call on every startup (create_index is idempotent).
    """
    # Unique email - signup relies on this for duplicate detection
    db[COLLECTIONS["users"]].create_index([("email", ASCENDING)], unique=True)

    db[COLLECTIONS["job_roles"]].create_index([("domain", ASCENDING)])
    db[COLLECTIONS["job_roles"]].create_index([("title", ASCENDING)])

    db[COLLECTIONS["scholarships"]].create_index([("academicLevel", ASCENDING)])
    db[COLLECTIONS["scholarships"]].create_index([("category", ASCENDING)])

    logger.info("MongoDB indexes ensured on %s", db.name)


def get_mongo_db(request: Request) -> Database:
    """
    FastAPI dependency - the database opened at startup.
    Usage:
        @router.get("/things")
        def things(db: Database = Depends(get_mongo_db)):
            ...
    """
    return request.app.state.mongo_db


def test_mongo_connection(client: MongoClient) -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client.admin.command("ping")
        return True
    except Exception as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False
