import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from wellbeing.database import get_db
from wellbeing.models.users import User
from wellbeing.schemas.auth import LoginRequest, LoginResponse, RegisterRequest
from wellbeing.schemas.users import UserCreateRequest, UserResponse
from wellbeing.services.user_service import DuplicateUsernameError, UserService
from wellbeing.utils.jwt import create_access_token
from wellbeing.utils.security import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter()


def _login_response(user: User) -> LoginResponse:
    # JWT 발급
    access_token = create_access_token(data={"sub": str(user.id)})

    return LoginResponse(
        id=user.id,
        username=user.username,
        name=user.name,
        email=user.email,
        role=user.role,
        is_admin=bool(user.is_admin),
        department=user.department,
        last_login_at=user.last_login_at,
        access_token=access_token,
    )


@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, db: AsyncSession = Depends(get_db)):
    user = await UserService(db).authenticate(payload.username, payload.password)

    if not user:
        logger.warning(f"Failed login attempt for {payload.username}")
        raise HTTPException(status_code=401, detail="Invalid username or password")

    logger.info(f"User {user.username} logged in")
    return _login_response(user)


@router.post("/register", response_model=LoginResponse)
async def register(payload: RegisterRequest, db: AsyncSession = Depends(get_db)):
    try:
        user = await UserService(db).create(UserCreateRequest(
            name=payload.name,
            email=payload.email,
            username=payload.username,
            password=payload.password,
            department=payload.department,
        ))
    except DuplicateUsernameError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _login_response(user)


@router.get("/me", response_model=UserResponse)
async def me(current_user: User = Depends(get_current_user)):
    return current_user
