"""
Pydantic Schemas - Request/Response Validation

All API request, response and AI output schemas in one file for simplicity.
Field names are camelCase on the wire (and in MongoDB), snake_case in Python.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Dict, List, Optional

from pydantic import (
    BaseModel, ConfigDict, EmailStr, Field, StringConstraints, field_validator
)
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]
TrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


# ============================================================
# ENUMS
# ============================================================

class EducationLevel(str, Enum):
    middle_school = "Middle School"
    high_school = "High School"
    diploma = "Diploma"
    undergraduate = "Undergraduate"
    postgraduate = "Postgraduate"


# ============================================================
# AUTH SCHEMAS
# ============================================================

class SignupRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)


class AuthUser(BaseModel):
    id: str
    email: str


class TokenResponse(BaseModel):
    token: str
    user: AuthUser


# ============================================================
# USER SCHEMAS
# ============================================================

class ProfileRequest(CamelModel):
    full_name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=2)]
    age: int = Field(..., ge=12, le=100)
    education_level: EducationLevel
    interests: List[TrimmedStr] = Field(..., min_length=1)

    @field_validator("age", mode="before")
    @classmethod
    def check_age_is_whole_number(cls, v):
        # JSON numbers only; 19.0 counts as 19
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("age must be a number")
        if isinstance(v, float) and not v.is_integer():
            raise ValueError("age must be a whole number")
        return int(v)


class PsychometricRequest(BaseModel):
    answers: Dict[str, NonEmptyStr]

    @field_validator("answers")
    @classmethod
    def check_answer_count(cls, v: Dict[str, str]) -> Dict[str, str]:
        if not 8 <= len(v) <= 10:
            raise ValueError("answers must contain 8-10 entries")
        return v


class OkResponse(BaseModel):
    ok: bool = True


# ============================================================
# AI OUTPUT SCHEMAS
# These are the enforced contracts for model output. Prompts ask
# for narrower counts; only the bounds below are validated.
# ============================================================

class CourseRecommendation(CamelModel):
    course: NonEmptyStr
    confidence: float = Field(..., ge=0, le=100)
    reason: NonEmptyStr


class Traits(CamelModel):
    logical_thinking: float = Field(..., ge=0, le=100)
    creativity: float = Field(..., ge=0, le=100)
    practical_skills: float = Field(..., ge=0, le=100)
    communication_leadership: float = Field(..., ge=0, le=100)


class AiAnalysis(CamelModel):
    primary_domain: NonEmptyStr
    recommended_courses: List[CourseRecommendation] = Field(..., min_length=1, max_length=10)
    traits: Traits
    summary: NonEmptyStr


class AiPortfolio(CamelModel):
    strength_summary: NonEmptyStr
    recommended_skills: List[NonEmptyStr] = Field(..., min_length=3, max_length=12)
    learning_focus_areas: List[NonEmptyStr] = Field(..., min_length=3, max_length=12)
    suggested_projects: List[NonEmptyStr] = Field(..., min_length=2, max_length=10)


class RoadmapStage(CamelModel):
    stage: NonEmptyStr
    what_to_study: List[NonEmptyStr] = Field(..., min_length=1, max_length=10)
    skills_to_learn: List[NonEmptyStr] = Field(..., min_length=1, max_length=10)
    certifications: List[NonEmptyStr] = Field(..., max_length=10)
    projects: List[NonEmptyStr] = Field(..., min_length=1, max_length=10)
    internships: List[NonEmptyStr] = Field(..., max_length=10)


class AiRoadmap(CamelModel):
    primary_domain: NonEmptyStr
    stages: List[RoadmapStage] = Field(..., min_length=3, max_length=8)
    notes: NonEmptyStr


# ============================================================
# AI RESPONSE SCHEMAS
# ============================================================

class AnalysisResponse(CamelModel):
    model: str
    created_at: datetime
    analysis: AiAnalysis


class CourseRecommendationResponse(AiAnalysis):
    model: str
    created_at: datetime


class PortfolioResponse(CamelModel):
    model: str
    created_at: datetime
    portfolio: AiPortfolio


class RoadmapResponse(CamelModel):
    model: str
    created_at: datetime
    roadmap: AiRoadmap


# ============================================================
# CATALOG SCHEMAS
# ============================================================

class SalaryRange(BaseModel):
    min: int
    max: int


class AmountRange(BaseModel):
    min: Optional[int] = None
    max: Optional[int] = None


class JobRoleOut(CamelModel):
    id: str
    title: str
    domain: str
    salary_range_inr: SalaryRange
    required_skills: List[str] = []
    demand_level: str
    course_tags: List[str] = []


class JobRoleListResponse(CamelModel):
    domain: Optional[str] = None
    count: int
    job_roles: List[JobRoleOut]


class ScholarshipOut(CamelModel):
    id: str
    name: str
    url: str
    category: Optional[str] = None
    academic_level: str
    deadline: Optional[str] = None
    amount_inr: Optional[AmountRange] = None
    eligibility: Optional[str] = None


class ScholarshipFilters(CamelModel):
    course: Optional[str] = None
    category: Optional[str] = None
    academic_level: str


class ScholarshipListResponse(CamelModel):
    filters: ScholarshipFilters
    count: int
    scholarships: List[ScholarshipOut]
