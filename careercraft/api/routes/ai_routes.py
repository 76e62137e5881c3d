"""
AI Routes

POST /ai/analyze - Run course analysis (always regenerates)
GET /ai/course-recommendation - Cached analysis
GET /ai/portfolio - Cached portfolio
GET /ai/career-roadmap - Cached career roadmap
GET /ai/job-roles - Job roles for the analysed domain/courses

Cached endpoints accept ?refresh=1 to regenerate.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from careercraft.api.deps import (
    get_career_ai_service, get_catalog_service, get_user_service, query_str
)
from careercraft.core.auth import get_current_user_id
from careercraft.schemas.schemas import (
    AnalysisResponse, CourseRecommendationResponse, JobRoleListResponse,
    PortfolioResponse, RoadmapResponse
)
from careercraft.services.career_ai_service import CacheRead, CareerAIService
from careercraft.services.catalog_service import CatalogService
from careercraft.services.user_service import UserService, get_ai_slot

router = APIRouter(prefix="/ai", tags=["AI"])

REFRESH_QUERY = Query(None, description="Pass 1 to regenerate instead of reading the cache")


@router.post("/analyze", response_model=AnalysisResponse)
def analyze(
    user_id: str = Depends(get_current_user_id),
    service: CareerAIService = Depends(get_career_ai_service)
):
    """
    Analyse profile + psychometric answers.

    Requires: /user/profile and /user/psychometric saved.
    Result is cached and feeds portfolio, roadmap, job roles and scholarships.
    """
    entry = service.analyze(user_id)
    return {"model": entry["model"], "createdAt": entry["createdAt"], "analysis": entry["data"]}


@router.get("/course-recommendation", response_model=CourseRecommendationResponse)
def course_recommendation(
    refresh: Optional[str] = REFRESH_QUERY,
    user_id: str = Depends(get_current_user_id),
    service: CareerAIService = Depends(get_career_ai_service)
):
    """Recommended courses, primary domain, traits and summary."""
    entry = service.get_slot(user_id, "analysis", CacheRead.from_query(refresh))
    return {"model": entry["model"], "createdAt": entry["createdAt"], **entry["data"]}


@router.get("/portfolio", response_model=PortfolioResponse)
def portfolio(
    refresh: Optional[str] = REFRESH_QUERY,
    user_id: str = Depends(get_current_user_id),
    service: CareerAIService = Depends(get_career_ai_service)
):
    """
    Strength summary, skills, focus areas and project ideas.

    Requires: profile, psychometric answers and analysis.
    """
    entry = service.get_slot(user_id, "portfolio", CacheRead.from_query(refresh))
    return {"model": entry["model"], "createdAt": entry["createdAt"], "portfolio": entry["data"]}


@router.get("/career-roadmap", response_model=RoadmapResponse)
def career_roadmap(
    refresh: Optional[str] = REFRESH_QUERY,
    user_id: str = Depends(get_current_user_id),
    service: CareerAIService = Depends(get_career_ai_service)
):
    """
    Stage-wise roadmap (study, skills, certifications, projects, internships).

    Requires: profile, psychometric answers and analysis.
    """
    entry = service.get_slot(user_id, "roadmap", CacheRead.from_query(refresh))
    return {"model": entry["model"], "createdAt": entry["createdAt"], "roadmap": entry["data"]}


@router.get("/job-roles", response_model=JobRoleListResponse)
def job_roles(
    domain: Optional[str] = Query(None, description="Override the analysed primary domain"),
    course: Optional[str] = Query(None, description="Extra course tag to match"),
    user_id: str = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service),
    catalog: CatalogService = Depends(get_catalog_service)
):
    """
    Job roles in the primary domain whose course tags match any
    recommended course (max 30).

    Needs a cached analysis unless ?domain= or ?course= is given.
    """
    user = users.get_by_id(user_id)
    analysis = get_ai_slot(user, "analysis")

    effective_domain, roles = catalog.find_job_roles(
        domain=query_str(domain),
        course=query_str(course),
        analysis=analysis["data"] if analysis else None
    )
    return {"domain": effective_domain, "count": len(roles), "jobRoles": roles}
