"""FastAPI 의존성 주입 모듈 — 인증, 권한 검사, 서비스 제공.

FastAPI dependency injection module — Authentication, authorization, and
service providers.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. 토큰이 없으면 401 "Access denied" (Missing token → 401)
    3. decode_token()이 서명/만료를 검증, 실패 시 403 "Invalid token"
       (Bad signature or expired → 403)
    4. 클레임 {id, email, role}을 CurrentUser로 반환하고 request.state.user에 저장
       (Claims are returned and attached to the request state)

Authorization Flow (require_role):
    1. get_current_user로 사용자 인증 (Runs only after authentication)
    2. 클레임의 역할이 허용 목록에 없으면 403 (Role not allowed → 403)
"""

from dataclasses import dataclass
from typing import Annotated, Any, Awaitable, Callable

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from store_ratings.config import settings
from store_ratings.database import get_db
from store_ratings.models.user import User, UserRole
from store_ratings.repositories.user_repository import user_repository
from store_ratings.services.auth_service import AuthService, auth_service
from store_ratings.services.dashboard_service import DashboardService, dashboard_service
from store_ratings.services.rating_service import RatingService, rating_service
from store_ratings.services.store_service import StoreService, store_service
from store_ratings.services.user_service import UserService, user_service
from store_ratings.utils.exceptions import ForbiddenError, UnauthorizedError
from store_ratings.utils.jwt import decode_token

# HTTP Bearer 토큰 추출기 — 누락 시 직접 401 처리 (auto_error=False)
# (Extracts the token; missing tokens are reported by get_current_user)
security: HTTPBearer = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """토큰에서 해석된 요청자 — Caller identity resolved from the token."""

    id: int
    email: str
    role: str


def _claims_to_user(payload: dict[str, Any]) -> CurrentUser:
    user_id = payload.get("id")
    email = payload.get("email")
    role = payload.get("role")
    if (
        isinstance(user_id, bool)
        or not isinstance(user_id, int)
        or not isinstance(email, str)
        or role not in UserRole.values()
    ):
        raise ForbiddenError("Invalid token")
    return CurrentUser(id=user_id, email=email, role=role)


async def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CurrentUser:
    """Bearer 토큰에서 현재 사용자를 해석합니다.

    Resolve the caller from the Authorization header.

    Raises:
        UnauthorizedError(401): 토큰 누락 (Missing token)
        ForbiddenError(403): 서명 불일치, 만료, 잘못된 클레임, 폐기된 토큰
                             (Bad signature, expired, malformed claims, revoked)
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Access denied")

    try:
        payload: dict[str, Any] = decode_token(credentials.credentials)
    except jwt.InvalidTokenError:
        raise ForbiddenError("Invalid token")

    current: CurrentUser = _claims_to_user(payload)

    if settings.JWT_REVOKE_ON_PASSWORD_CHANGE:
        # 토큰 버전 확인 — Tokens issued before the last password change are rejected
        user: User | None = await user_repository.get_by_id(db, current.id)
        if user is None or user.token_version != payload.get("ver", 0):
            raise ForbiddenError("Invalid token")

    request.state.user = current
    return current


def require_role(*roles: UserRole, detail: str) -> Callable[..., Awaitable[CurrentUser]]:
    """역할 기반 권한 검사 의존성 팩토리.

    Dependency factory enforcing that the authenticated caller has one of
    ``roles``.

    Args:
        roles: 허용되는 역할 (Allowed roles)
        detail: 거부 시 오류 메시지 (Error message on rejection)

    Returns:
        FastAPI 의존성 함수 — 인증된 사용자 반환 또는 403 발생
        (Dependency returning the caller or raising 403)
    """
    allowed: set[str] = {role.value for role in roles}

    async def _check(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if current_user.role not in allowed:
            raise ForbiddenError(detail)
        return current_user

    return _check


# 편의 의존성 — Pre-configured role gates
require_admin = require_role(UserRole.ADMIN, detail="Admin access required")
require_store_owner = require_role(UserRole.STORE_OWNER, detail="Store owner access required")


# ---------------------------------------------------------------------------
# 서비스 제공자 — Service providers (override via app.dependency_overrides)
# ---------------------------------------------------------------------------
def get_auth_service() -> AuthService:
    return auth_service


def get_user_service() -> UserService:
    return user_service


def get_store_service() -> StoreService:
    return store_service


def get_rating_service() -> RatingService:
    return rating_service


def get_dashboard_service() -> DashboardService:
    return dashboard_service
