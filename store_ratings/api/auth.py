"""인증 라우터 — 회원가입, 로그인, 비밀번호 변경, 프로필 조회.

Auth Router — Registration, login, password change, and profile endpoints.
Registration and login are public; the rest require a bearer token.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_ratings.api.deps import CurrentUser, get_auth_service, get_current_user
from store_ratings.database import get_db
from store_ratings.schemas.auth import (
    LoginRequest,
    LoginResponse,
    PasswordChangeRequest,
    RegisterRequest,
    RegisterResponse,
    UserProfile,
)
from store_ratings.schemas.common import MessageResponse
from store_ratings.services.auth_service import AuthService

router: APIRouter = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    data: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> RegisterResponse:
    """회원가입 — 항상 일반 사용자(user) 역할로 생성.

    Self-registration. The account always gets role "user".
    """
    result: RegisterResponse = await service.register(db, data)
    await db.commit()
    return result


@router.post("/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> LoginResponse:
    """로그인 — 24시간 유효한 토큰과 프로필 반환.

    Exchange email and password for a signed token and the stored profile.
    """
    return await service.login(db, data)


@router.put("/password", response_model=MessageResponse)
async def change_password(
    data: PasswordChangeRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> MessageResponse:
    """비밀번호 변경 — 현재 비밀번호 확인 후 변경."""
    await service.change_password(db, current_user.id, data)
    await db.commit()
    return MessageResponse(message="Password updated successfully")


@router.get("/me", response_model=UserProfile)
async def get_me(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> UserProfile:
    """현재 사용자 프로필 조회.

    Get the stored profile of the currently authenticated user.
    """
    return await service.get_profile(db, current_user.id)
