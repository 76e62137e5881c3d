"""
Catalog Service - job roles and scholarships (read-only reference data).

Both collections are curated outside the app (see scripts/seed_catalog.py).
Queries are plain MongoDB filters built from explicit query parameters,
falling back to the user's cached analysis and profile.

Course tags are stored lower-case; every tag we query with goes through
normalize_tag() first.
"""

from typing import List, Optional, Tuple

from pymongo.collection import Collection
from pymongo.database import Database

from careercraft.core.errors import PrerequisiteMissing
from careercraft.db.mongodb import COLLECTIONS

JOB_ROLE_LIMIT = 30
SCHOLARSHIP_LIMIT = 50


def normalize_tag(tag: str) -> str:
    return tag.strip().lower()


# ============================================================
# SERIALIZERS
# ============================================================

def serialize_job_role(doc: dict) -> dict:
    return {
        "id": str(doc["_id"]),
        "title": doc["title"],
        "domain": doc["domain"],
        "salaryRangeInr": doc["salaryRangeInr"],
        "requiredSkills": doc.get("requiredSkills", []),
        "demandLevel": doc["demandLevel"],
        "courseTags": doc.get("courseTags", [])
    }


def serialize_scholarship(doc: dict) -> dict:
    return {
        "id": str(doc["_id"]),
        "name": doc["name"],
        "url": doc["url"],
        "category": doc.get("category"),
        "academicLevel": doc["academicLevel"],
        "deadline": doc.get("deadline"),
        "amountInr": doc.get("amountInr"),
        "eligibility": doc.get("eligibility")
    }


class CatalogService:
    """
    Filters the job_roles and scholarships collections.
    `analysis` is the cached analysis data ({primaryDomain, recommendedCourses, ...}),
    `profile` the saved profile; either may be None.
    """

    def __init__(self, db: Database):
        self.job_roles: Collection = db[COLLECTIONS["job_roles"]]
        self.scholarships: Collection = db[COLLECTIONS["scholarships"]]

    def find_job_roles(
        self,
        domain: Optional[str] = None,
        course: Optional[str] = None,
        analysis: Optional[dict] = None
    ) -> Tuple[Optional[str], List[dict]]:
        """
        Roles matching the effective domain AND any effective course tag.

        Effective domain: explicit, else analysis primaryDomain.
        Effective tags: explicit course + every analysis course.

        Returns (effective_domain, roles).
        """
        if not analysis and not domain and not course:
            raise PrerequisiteMissing(
                "AI analysis missing. Run POST /ai/analyze or pass ?domain= / ?course=."
            )

        analysis = analysis or {}
        effective_domain = domain or analysis.get("primaryDomain")

        courses = [course] + [c.get("course") for c in analysis.get("recommendedCourses") or []]
        course_tags = [normalize_tag(c) for c in courses if c]

        query = {}
        if effective_domain:
            query["domain"] = effective_domain
        if course_tags:
            query["courseTags"] = {"$in": course_tags}

        roles = self.job_roles.find(query).limit(JOB_ROLE_LIMIT)
        return effective_domain, [serialize_job_role(r) for r in roles]

    def find_scholarships(
        self,
        course: Optional[str] = None,
        category: Optional[str] = None,
        academic_level: Optional[str] = None,
        analysis: Optional[dict] = None,
        profile: Optional[dict] = None
    ) -> Tuple[dict, List[dict]]:
        """
        Scholarships for the effective academic level, optionally narrowed
        by category and course.

        Effective level: explicit, else profile educationLevel (required).
        Effective course: explicit, else the top-ranked analysis course.

        Returns (filters, scholarships).
        """
        level = academic_level or (profile or {}).get("educationLevel")
        if not level:
            raise PrerequisiteMissing(
                "Academic level missing. Save /user/profile or pass ?academicLevel=."
            )

        if not course:
            ranked = (analysis or {}).get("recommendedCourses") or []
            course = ranked[0].get("course") if ranked else None

        query = {"academicLevel": level}
        if category:
            query["category"] = category
        if course:
            query["courseTags"] = {"$in": [normalize_tag(course)]}

        items = self.scholarships.find(query).limit(SCHOLARSHIP_LIMIT)
        filters = {"course": course, "category": category, "academicLevel": level}
        return filters, [serialize_scholarship(s) for s in items]
