"""
User Service - the users collection.

One document per account. Profile, psychometric answers and cached
AI results are embedded sub-documents, each replaced wholesale:

{
    "_id": ObjectId,
    "email": "asha@example.com",          # lower-cased, unique index
    "passwordHash": "$2b$...",
    "createdAt": datetime, "updatedAt": datetime,
    "profile": {"fullName", "age", "educationLevel", "interests"},
    "psychometric": {"answers": {"q1": "a", ...}, "submittedAt": datetime},
    "ai": {
        "analysis":  {"data": {...}, "createdAt": datetime, "model": "..."},
        "portfolio": {...},
        "roadmap":   {...}
    }
}
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from careercraft.core.auth import dummy_verify, hash_password, verify_password
from careercraft.core.errors import DuplicateEmail, InvalidCredentials, NotFound
from careercraft.db.mongodb import COLLECTIONS

logger = logging.getLogger(__name__)

AI_SLOTS = ("analysis", "portfolio", "roadmap")


def utc_now() -> datetime:
    """
    Naive UTC timestamp truncated to milliseconds.
    BSON dates hold milliseconds, so a value returned straight away
    matches the one read back from MongoDB later.
    """
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def public_user(doc: dict) -> dict:
    """Shape a user document for GET /me (no hash, no AI cache)."""
    psychometric = doc.get("psychometric")
    return {
        "id": str(doc["_id"]),
        "email": doc["email"],
        "profile": doc.get("profile"),
        "psychometric": {"submittedAt": psychometric["submittedAt"]} if psychometric else None
    }


class UserService:
    """
    Account storage and self-service updates.
    """

    def __init__(self, db: Database):
        self.collection: Collection = db[COLLECTIONS["users"]]

    def create_account(self, email: str, password: str) -> dict:
        """
        Insert a new account.

        Raises DuplicateEmail if the (lower-cased) email is taken.
        The unique index catches signups racing past the pre-check.
        """
        email = normalize_email(email)
        if self.collection.find_one({"email": email}, projection={"_id": 1}):
            raise DuplicateEmail()

        now = utc_now()
        doc = {
            "_id": ObjectId(),
            "email": email,
            "passwordHash": hash_password(password),
            "createdAt": now,
            "updatedAt": now
        }
        try:
            self.collection.insert_one(doc)
        except DuplicateKeyError:
            raise DuplicateEmail()

        logger.info("Created account %s", doc["_id"])
        return doc

    def authenticate(self, email: str, password: str) -> dict:
        """
        Return the account for valid credentials.
        Unknown email and wrong password raise the same InvalidCredentials.
        """
        user = self.collection.find_one({"email": normalize_email(email)})
        if user is None:
            dummy_verify()
        elif verify_password(password, user["passwordHash"]):
            return user

        logger.warning("Failed login attempt")
        raise InvalidCredentials()

    def get_by_id(self, user_id: str) -> dict:
        """Fetch account by ObjectId hex string. Raises NotFound."""
        user = self.collection.find_one({"_id": ObjectId(user_id)})
        if not user:
            raise NotFound()
        return user

    def _set(self, user_id: str, fields: Dict[str, Any], now: Optional[datetime] = None) -> None:
        """Single-document $set plus updatedAt. Raises NotFound if nothing matched."""
        update = dict(fields)
        update["updatedAt"] = now or utc_now()
        result = self.collection.update_one({"_id": ObjectId(user_id)}, {"$set": update})
        if result.matched_count == 0:
            raise NotFound()

    def update_profile(self, user_id: str, profile: dict) -> None:
        self._set(user_id, {"profile": profile})

    def update_psychometric(self, user_id: str, answers: Dict[str, str]) -> None:
        now = utc_now()
        self._set(user_id, {"psychometric": {"answers": answers, "submittedAt": now}}, now)

    def update_ai_slot(self, user_id: str, slot: str, data: dict, model: str, created_at: datetime) -> dict:
        """
        Replace one cached AI result. Returns the stored entry.
        """
        if slot not in AI_SLOTS:
            raise ValueError(f"Unknown AI slot: {slot}")

        entry = {"data": data, "createdAt": created_at, "model": model}
        self._set(user_id, {f"ai.{slot}": entry}, created_at)
        return entry


def get_ai_slot(user: dict, slot: str) -> Optional[dict]:
    """Cached {data, createdAt, model} for slot, or None."""
    entry = (user.get("ai") or {}).get(slot)
    if entry and entry.get("data"):
        return entry
    return None
