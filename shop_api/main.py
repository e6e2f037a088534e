"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어 및 라우터 등록.

FastAPI application entry point — Middleware and router registration.
Configures CORS, request logging, SQL statement counting, health check,
and includes the order routers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shop_api.api import api_router
from shop_api.config import settings
from shop_api.middleware.axiom_logging import AxiomLoggingMiddleware
from shop_api.middleware.query_count import QueryCountMiddleware

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# 나중에 등록한 미들웨어가 바깥쪽 — The last middleware added runs outermost.
# SQL 카운트 미들웨어가 가장 안쪽이어야 Axiom 로그에 X-Query-Count가 포함됨
# (Query counting sits innermost so the Axiom middleware can read X-Query-Count)
app.add_middleware(QueryCountMiddleware)

# Axiom API 로깅 미들웨어 — Axiom API request/response logging
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Query-Count"],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# 라우터 등록 — /api/v1/orders ~ /api/v6/orders, /api/v1/simple-orders ~ /api/v4/simple-orders
app.include_router(api_router, prefix="/api")
