"""
Route dependencies - services built per request from the shared
database handle and AI client.
"""

from typing import Optional

from fastapi import Depends
from pymongo.database import Database

from careercraft.db.mongodb import get_mongo_db
from careercraft.services.career_ai_service import CareerAIService
from careercraft.services.catalog_service import CatalogService
from careercraft.services.openai_client import OpenAIClient, get_ai_client
from careercraft.services.user_service import UserService


def get_user_service(db: Database = Depends(get_mongo_db)) -> UserService:
    return UserService(db)


def get_catalog_service(db: Database = Depends(get_mongo_db)) -> CatalogService:
    return CatalogService(db)


def get_career_ai_service(
    users: UserService = Depends(get_user_service),
    ai_client: OpenAIClient = Depends(get_ai_client)
) -> CareerAIService:
    return CareerAIService(users, ai_client)


def query_str(value: Optional[str]) -> Optional[str]:
    """Trimmed query value; blank counts as absent."""
    if value is None:
        return None
    return value.strip() or None
