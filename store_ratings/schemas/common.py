"""공통 Pydantic 응답 스키마 정의.

Common Pydantic response schema definitions shared across API domains.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """단순 메시지 응답 — Generic ``{"message": ...}`` response."""

    message: str


class ErrorResponse(BaseModel):
    """오류 응답 — Body of every non-2xx response."""

    error: str


class HealthResponse(BaseModel):
    status: str
    message: str
