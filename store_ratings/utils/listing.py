"""목록 조회 유틸리티 모듈 — 필터 및 정렬.

Listing query utilities — Case-insensitive substring filters and
allow-list based sorting for SQLAlchemy Select statements.

Sort keys come from the query string and are never interpolated into SQL:
each listing declares a mapping from accepted keys to column expressions and
anything else is rejected.
"""

from typing import Any, Mapping

from sqlalchemy import ColumnElement, Select

from store_ratings.utils.exceptions import BadRequestError

SORT_ORDERS: tuple[str, ...] = ("ASC", "DESC")


def escape_like(value: str, escape: str = "\\") -> str:
    """LIKE 와일드카드를 이스케이프합니다 — Escape LIKE wildcards."""
    return (
        value.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )


def contains_ci(column: Any, value: str) -> ColumnElement[bool]:
    """대소문자 구분 없는 부분 문자열 조건을 생성합니다.

    Build a case-insensitive "column contains value" condition.
    """
    return column.ilike(f"%{escape_like(value)}%", escape="\\")


def apply_text_filters(
    query: Select[Any],
    columns: Mapping[str, Any],
    filters: Mapping[str, str | None],
) -> Select[Any]:
    """비어있지 않은 필터만 WHERE 조건으로 추가합니다.

    Add a ``contains_ci`` condition for every non-empty filter whose key is
    present in ``columns``. Empty strings count as "no filter".
    """
    for key, value in filters.items():
        if value and key in columns:
            query = query.where(contains_ci(columns[key], value))
    return query


def apply_sort(
    query: Select[Any],
    allowed: Mapping[str, Any],
    sort_by: str | None,
    sort_order: str | None,
    default: str,
    tiebreak: Any | None = None,
) -> Select[Any]:
    """허용 목록 기반 정렬을 적용합니다.

    Apply ORDER BY for ``sort_by`` using the ``allowed`` key-to-column map.

    Args:
        query: 대상 SELECT 쿼리 (Query to order)
        allowed: 허용된 정렬 키 → 컬럼 (Accepted sort keys mapped to columns)
        sort_by: 요청된 정렬 키, None/빈 값이면 기본값 (Requested key)
        sort_order: "ASC" 또는 "DESC", 대소문자 무관 (Direction, any case)
        default: 기본 정렬 키 (Default key)
        tiebreak: 동률 시 보조 정렬 컬럼 (Secondary ascending column)

    Raises:
        BadRequestError: 허용되지 않은 정렬 키/방향 (Unknown key or direction)
    """
    key: str = sort_by or default
    if key not in allowed:
        raise BadRequestError(f"Invalid sort field: {key}")

    direction: str = (sort_order or "ASC").upper()
    if direction not in SORT_ORDERS:
        raise BadRequestError(f"Invalid sort order: {sort_order}")

    column = allowed[key]
    query = query.order_by(column.desc() if direction == "DESC" else column.asc())
    if tiebreak is not None:
        query = query.order_by(tiebreak.asc())
    return query
