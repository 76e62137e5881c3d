"""
Scholarship Routes

GET /scholarships - Scholarships for the student's level and course
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from careercraft.api.deps import get_catalog_service, get_user_service, query_str
from careercraft.core.auth import get_current_user_id
from careercraft.schemas.schemas import ScholarshipListResponse
from careercraft.services.catalog_service import CatalogService
from careercraft.services.user_service import UserService, get_ai_slot

router = APIRouter(prefix="/scholarships", tags=["Scholarships"])


@router.get("", response_model=ScholarshipListResponse)
def list_scholarships(
    course: Optional[str] = Query(None, description="Defaults to the top recommended course"),
    category: Optional[str] = Query(None, description="Exact category, e.g. Merit"),
    academic_level: Optional[str] = Query(
        None, alias="academicLevel", description="Defaults to the profile's education level"
    ),
    user_id: str = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service),
    catalog: CatalogService = Depends(get_catalog_service)
):
    """
    Filter scholarships (max 50).

    Academic level is required - from ?academicLevel= or the saved profile.
    """
    user = users.get_by_id(user_id)
    analysis = get_ai_slot(user, "analysis")

    filters, items = catalog.find_scholarships(
        course=query_str(course),
        category=query_str(category),
        academic_level=query_str(academic_level),
        analysis=analysis["data"] if analysis else None,
        profile=user.get("profile")
    )
    return {"filters": filters, "count": len(items), "scholarships": items}
