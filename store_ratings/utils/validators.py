"""입력 검증 규칙 모듈.

Field validation rules shared by self-registration, admin provisioning,
password change, listing queries, and rating submission.
Each ``validate_*`` function raises BadRequestError with the first failing
rule's message; callers invoke them before touching the database.
"""

import re
from typing import Any

from store_ratings.models.user import UserRole
from store_ratings.utils.exceptions import BadRequestError

NAME_MIN_LENGTH: int = 15
NAME_MAX_LENGTH: int = 60
ADDRESS_MAX_LENGTH: int = 400

# 비밀번호 특수문자 집합 — Accepted password symbols
PASSWORD_SYMBOLS: str = '!@#$%^&*(),.?":{}|<>'

_PASSWORD_RE = re.compile(rf"^(?=.*[A-Z])(?=.*[{re.escape(PASSWORD_SYMBOLS)}]).{{8,16}}$")
_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

NAME_ERROR = f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
ADDRESS_ERROR = f"Address must not exceed {ADDRESS_MAX_LENGTH} characters"
PASSWORD_ERROR = (
    "Password must be 8-16 characters with at least one uppercase letter "
    "and one special character"
)
EMAIL_ERROR = "Invalid email format"
ROLE_ERROR = "Invalid role"
STORE_FIELDS_ERROR = "Store name and address required for store owners"
RATING_ERROR = "Rating must be between 1 and 5"


def validate_name(name: str | None) -> None:
    if not name or not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        raise BadRequestError(NAME_ERROR)


def validate_address(address: str | None) -> None:
    if address is not None and len(address) > ADDRESS_MAX_LENGTH:
        raise BadRequestError(ADDRESS_ERROR)


def validate_password(password: str | None) -> None:
    if not password or not _PASSWORD_RE.fullmatch(password):
        raise BadRequestError(PASSWORD_ERROR)


def validate_email(email: str | None) -> None:
    if not email or not _EMAIL_RE.fullmatch(email):
        raise BadRequestError(EMAIL_ERROR)


def validate_role(role: str | None) -> None:
    if role not in UserRole.values():
        raise BadRequestError(ROLE_ERROR)


def validate_account_fields(
    name: str | None,
    email: str | None,
    password: str | None,
    address: str | None,
) -> None:
    """계정 필드를 고정된 순서로 검증합니다.

    Validate account fields in the fixed order name, address, password,
    email. Only the first failing rule is reported.

    Raises:
        BadRequestError: 첫 번째로 실패한 규칙 (First failing rule)
    """
    validate_name(name)
    validate_address(address)
    validate_password(password)
    validate_email(email)


def validate_rating_value(value: Any) -> int:
    """평점 값이 1~5 사이 정수인지 확인합니다.

    Accept only real integers in 1..5. Booleans, floats and numeric strings
    are rejected.
    """
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 5:
        raise BadRequestError(RATING_ERROR)
    return value
