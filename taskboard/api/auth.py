# Authentication API routes for user registration, login and profile lookup

from fastapi import APIRouter, Depends, status

from taskboard.dependencies.auth import get_current_user
from taskboard.dependencies.services import get_auth_service
from taskboard.models import User
from taskboard.schemas import AuthResponse, UserInfo, UserLogin, UserRegister
from taskboard.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register_user(
    user_data: UserRegister,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Register a new user and return a bearer token for immediate use."""
    return await auth_service.register(user_data)


@router.post("/login", response_model=AuthResponse)
async def login_user(
    user_data: UserLogin,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Authenticate user and return a JWT token for API access."""
    return await auth_service.login(user_data)


@router.get("/me", response_model=UserInfo)
async def get_current_user_info(
    current_user: User = Depends(get_current_user),
):
    """Retrieve current authenticated user's profile information."""
    return UserInfo.model_validate(current_user)
