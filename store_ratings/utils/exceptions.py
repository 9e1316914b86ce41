"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses, one per error kind the API
reports. The application-level handler in ``store_ratings.main`` renders
every one of them as ``{"error": detail}``.

Usage:
    from store_ratings.utils.exceptions import NotFoundError, DuplicateError
    raise NotFoundError("Store not found")
    raise DuplicateError("Email already exists")
"""

from fastapi import HTTPException, status


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 입력 검증 실패 시 사용.

    400 Bad Request exception.
    Raised when input is malformed or out of range (name length, password
    complexity, rating range, unknown sort field, ...).
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class DuplicateError(HTTPException):
    """중복 리소스 예외 — 고유 제약 위반 시 사용.

    Conflict on a uniqueness constraint (e.g. duplicate email).
    Reported as 400, which is what API clients already expect for
    "Email already exists".
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    401 Unauthorized exception.
    Raised when the bearer token is missing or credentials do not match.
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class ForbiddenError(HTTPException):
    """403 Forbidden 예외 — 토큰 무효 또는 권한 부족 시 사용.

    403 Forbidden exception.
    Raised for invalid/expired tokens and for roles not allowed on a route.
    """

    def __init__(self, detail: str = "Insufficient permissions") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용."""

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class InternalError(HTTPException):
    """500 예외 — 저장소 실패 등 예상치 못한 오류.

    500 Internal Server Error for storage or otherwise unexpected failures.
    """

    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
