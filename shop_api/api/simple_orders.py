"""주문 요약 라우터 — xToOne(회원, 배송) 관계 조회 전략 엔드포인트.

Simple Order Router — To-one fetch strategies (v1 ~ v4).
    Order -> Member (many-to-one)
    Order -> Delivery (one-to-one)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.database import get_db
from shop_api.models.order import OrderStatus
from shop_api.repositories.order_repository import OrderSearch
from shop_api.schemas.entity import OrderEntity
from shop_api.schemas.order import OrderSimpleDto
from shop_api.schemas.order_query import OrderSimpleQueryDto
from shop_api.services.simple_order_fetch_service import simple_order_fetch_service

router: APIRouter = APIRouter()


@router.get("/v1/simple-orders", response_model=list[OrderEntity])
async def list_simple_orders_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
    member_name: Annotated[str | None, Query()] = None,
    order_status: Annotated[OrderStatus | None, Query()] = None,
) -> list[OrderEntity]:
    """V1. 엔티티 직접 노출 — 회원/배송만 초기화, 주문 상품은 null.

    Searched entities exposed directly. Member and delivery are initialized;
    the order item collection is not and serializes as null.
    """
    search = OrderSearch(member_name=member_name, order_status=order_status)
    return await simple_order_fetch_service.list_orders_v1(db, search)


@router.get("/v2/simple-orders", response_model=list[OrderSimpleDto])
async def list_simple_orders_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderSimpleDto]:
    """V2. 엔티티 → DTO, 지연 로딩 (1 + 회원 N + 배송 N)."""
    return await simple_order_fetch_service.list_orders_v2(db)


@router.get("/v3/simple-orders", response_model=list[OrderSimpleDto])
async def list_simple_orders_v3(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderSimpleDto]:
    """V3. 엔티티 → DTO, 페치 조인으로 쿼리 1번."""
    return await simple_order_fetch_service.list_orders_v3(db)


@router.get("/v4/simple-orders", response_model=list[OrderSimpleQueryDto])
async def list_simple_orders_v4(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderSimpleQueryDto]:
    """V4. DTO 직접 조회 — 필요한 컬럼만 SELECT."""
    return await simple_order_fetch_service.list_orders_v4(db)
