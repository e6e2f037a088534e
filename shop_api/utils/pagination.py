"""페이지네이션 유틸리티 모듈.

Pagination utility module for offset/limit list endpoints.
Provides the OffsetLimit value object and a FastAPI dependency that
validates the ``offset`` and ``limit`` query parameters.
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Query

from shop_api.config import settings


@dataclass(frozen=True)
class OffsetLimit:
    """오프셋/리밋 페이지 요청.

    Offset/limit page request applied to the root rows of a query.

    Attributes:
        offset: 건너뛸 행 수 (Rows to skip, 0-based)
        limit: 최대 반환 행 수 (Maximum rows returned)
    """

    offset: int = 0
    limit: int = settings.DEFAULT_PAGE_LIMIT


def offset_limit_params(
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_LIMIT)] = settings.DEFAULT_PAGE_LIMIT,
) -> OffsetLimit:
    """쿼리 파라미터에서 페이지 요청을 생성합니다.

    FastAPI dependency building an OffsetLimit from query parameters.
    Out-of-range values are rejected with FastAPI's default 422 response.
    """
    return OffsetLimit(offset=offset, limit=limit)
