"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication-related Pydantic request/response schema definitions.
Covers registration, login, password change, and current user info.

Request fields are optional at the schema level: presence and format are
checked by ``store_ratings.utils.validators`` so that the first failing rule
is reported with its own message, in a fixed order.
"""

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """회원가입 요청 스키마.

    Self-registration request schema. Any ``role`` sent by the client is
    ignored; self-registered accounts always get role "user".

    Attributes:
        name: 이름, 15~60자 (Display name)
        email: 로그인 이메일 (Login email)
        password: 비밀번호 — 평문, 서버에서 bcrypt 해싱 (Plain text, hashed server-side)
        address: 주소, 최대 400자 (Address, optional)
    """

    name: str | None = None
    email: str | None = None
    password: str | None = None
    address: str | None = None


class RegisterResponse(BaseModel):
    """회원가입 응답 스키마 — Registration result."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    user_id: int = Field(alias="userId")


class LoginRequest(BaseModel):
    """로그인 요청 스키마.

    Attributes:
        email: 로그인 이메일 (Login email)
        password: 비밀번호 — 평문, 서버에서 bcrypt 해시와 비교 (Compared to bcrypt hash)
    """

    email: str | None = None
    password: str | None = None


class UserProfile(BaseModel):
    """세션 사용자 프로필 — Profile returned with the token and by /me."""

    id: int
    name: str
    email: str
    role: str
    address: str | None


class LoginResponse(BaseModel):
    """로그인 응답 스키마.

    Attributes:
        token: JWT 액세스 토큰 — 만료: 24시간 기본 (Bearer token, default TTL 24h)
        user: 사용자 프로필 (Stored profile of the authenticated user)
    """

    token: str
    user: UserProfile


class PasswordChangeRequest(BaseModel):
    """비밀번호 변경 요청 스키마.

    Attributes:
        current_password: 현재 비밀번호 (JSON key ``currentPassword``)
        new_password: 새 비밀번호 (JSON key ``newPassword``)
    """

    model_config = ConfigDict(populate_by_name=True)

    current_password: str | None = Field(default=None, alias="currentPassword")
    new_password: str | None = Field(default=None, alias="newPassword")
