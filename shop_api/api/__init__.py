"""API 라우터 패키지 — 모든 주문 엔드포인트 통합.

API Router package — Aggregates all order endpoints into a single router
for inclusion in the FastAPI application under the ``/api`` prefix.

Included routers:
    - orders: 주문 + 주문 상품 조회 전략 v1~v6, 주문 생성/취소
              (Order collection fetch strategies and order commands)
    - simple_orders: xToOne 조회 전략 v1~v4 (To-one fetch strategies)
"""

from fastapi import APIRouter

from shop_api.api.orders import router as orders_router
from shop_api.api.simple_orders import router as simple_orders_router

api_router: APIRouter = APIRouter()

api_router.include_router(orders_router, tags=["Orders"])
api_router.include_router(simple_orders_router, tags=["Simple Orders"])
