"""
Authentication Routes

POST /auth/signup - Create account, get JWT token
POST /auth/login - Login and get JWT token
"""

from fastapi import APIRouter, Depends

from careercraft.api.deps import get_user_service
from careercraft.core.auth import create_access_token
from careercraft.schemas.schemas import LoginRequest, SignupRequest, TokenResponse
from careercraft.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["Authentication"])


def token_response(user: dict) -> TokenResponse:
    user_id = str(user["_id"])
    return TokenResponse(
        token=create_access_token(user_id, user["email"]),
        user={"id": user_id, "email": user["email"]}
    )


@router.post("/signup", response_model=TokenResponse, status_code=201)
def signup(request: SignupRequest, users: UserService = Depends(get_user_service)):
    """
    Create a new account and log straight in.

    Email is case-insensitive: "A@x.com" and "a@x.com" are the same account.
    """
    user = users.create_account(request.email, request.password)
    return token_response(user)


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, users: UserService = Depends(get_user_service)):
    """
    Login and receive JWT access token (valid 7 days).

    Include token in requests: Authorization: Bearer <token>
    """
    user = users.authenticate(request.email, request.password)
    return token_response(user)
