"""JWT 토큰 생성 및 검증 유틸리티 모듈.

JWT token creation and verification utility module.

JWT Payload Structure:
    {
        "id": 42,                  # 사용자 ID (User identifier)
        "email": "a@b.com",        # 로그인 이메일 (Login email)
        "role": "user",            # 역할 (admin | user | store_owner)
        "ver": 0,                  # 토큰 버전 (User token_version at issue time)
        "exp": 1234567890          # 만료 시간 UNIX timestamp (Expiration)
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any
import jwt

from store_ratings.config import settings


def create_access_token(data: dict[str, Any], expires_delta: timedelta | None = None) -> str:
    """JWT 액세스 토큰을 생성합니다.

    Generate a signed JWT with the given claims.
    Token expires after JWT_ACCESS_TOKEN_EXPIRE_HOURS (default: 24 hours)
    unless ``expires_delta`` is given.

    Args:
        data: JWT 클레임 {"id", "email", "role", "ver"} (Token claims)
        expires_delta: 만료 기간 재정의 (Optional lifetime override)

    Returns:
        str: 인코딩된 JWT 문자열 (Encoded JWT token string)
    """
    to_encode: dict[str, Any] = data.copy()
    lifetime: timedelta = expires_delta or timedelta(hours=settings.JWT_ACCESS_TOKEN_EXPIRE_HOURS)
    to_encode["exp"] = datetime.now(timezone.utc) + lifetime
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    """JWT 토큰을 디코딩하고 검증합니다.

    Decode and verify a JWT token string.

    Raises:
        jwt.ExpiredSignatureError: 토큰 만료 시 (When token has expired)
        jwt.InvalidTokenError: 유효하지 않은 토큰 (When token is invalid)
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET_KEY,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp"]},
    )
