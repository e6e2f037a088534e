"""요청별 SQL 실행 횟수 헤더 미들웨어.

Per-request SQL statement count middleware.
Binds a QueryCounter around each request and reports the total in the
``X-Query-Count`` response header, making N+1 behavior visible per endpoint.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from shop_api.utils.query_counter import count_queries

QUERY_COUNT_HEADER: str = "X-Query-Count"


class QueryCountMiddleware(BaseHTTPMiddleware):
    """요청 처리 중 실행된 SQL 문 개수를 응답 헤더에 기록합니다.

    Adds the number of SQL statements executed while handling the request.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        with count_queries() as counter:
            response = await call_next(request)
        response.headers[QUERY_COUNT_HEADER] = str(counter.count)
        return response
