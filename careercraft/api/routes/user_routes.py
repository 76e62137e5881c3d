"""
User Routes

GET /me - Current account with profile and psychometric status
POST /user/profile - Save profile (replaces any previous one)
POST /user/psychometric - Save 8-10 questionnaire answers (replaces previous)
"""

from fastapi import APIRouter, Depends

from careercraft.api.deps import get_user_service
from careercraft.core.auth import get_current_user_id
from careercraft.schemas.schemas import OkResponse, ProfileRequest, PsychometricRequest
from careercraft.services.user_service import UserService, public_user

router = APIRouter(tags=["Users"])


@router.get("/me")
def get_me(
    user_id: str = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service)
):
    """Get current authenticated user's info."""
    return {"user": public_user(users.get_by_id(user_id))}


@router.post("/user/profile", response_model=OkResponse)
def save_profile(
    data: ProfileRequest,
    user_id: str = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service)
):
    """Save name, age, education level and interests."""
    users.update_profile(user_id, data.model_dump(mode="json", by_alias=True))
    return OkResponse()


@router.post("/user/psychometric", response_model=OkResponse)
def save_psychometric(
    data: PsychometricRequest,
    user_id: str = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service)
):
    """Save questionnaire answers as {questionId: choiceId}."""
    users.update_psychometric(user_id, data.answers)
    return OkResponse()
