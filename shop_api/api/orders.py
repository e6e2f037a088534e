"""주문 라우터 — 주문 + 주문 상품 조회 전략 및 주문 명령 엔드포인트.

Order Router — Order collection fetch strategies (v1 ~ v6) and order commands.
Every GET returns the same aggregate; versions differ only in how many
round-trips they cost (see the X-Query-Count response header).
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.database import get_db
from shop_api.schemas.entity import OrderEntity
from shop_api.schemas.order import OrderCreate, OrderCreateResponse, OrderDto
from shop_api.schemas.order_query import OrderQueryDto
from shop_api.services.order_fetch_service import order_fetch_service
from shop_api.services.order_service import order_service
from shop_api.utils.pagination import OffsetLimit, offset_limit_params

router: APIRouter = APIRouter()


@router.get("/v1/orders", response_model=list[OrderEntity])
async def list_orders_v1(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderEntity]:
    """V1. 엔티티 직접 노출.

    Entities exposed directly; lazy associations are force-initialized
    and back-references are omitted.
    """
    return await order_fetch_service.list_orders_v1(db)


@router.get("/v2/orders", response_model=list[OrderDto])
async def list_orders_v2(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderDto]:
    """V2. 엔티티 → DTO, 페치 조인 없음 (지연 로딩으로 N+1).

    Entities mapped to DTOs with lazy loading per order.
    """
    return await order_fetch_service.list_orders_v2(db)


@router.get("/v3/orders", response_model=list[OrderDto])
async def list_orders_v3(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderDto]:
    """V3. 엔티티 → DTO, 페치 조인으로 쿼리 1번 (페이징 불가).

    Entities fetched with a single fetch join, mapped to DTOs.
    """
    return await order_fetch_service.list_orders_v3(db)


@router.get("/v3.1/orders", response_model=list[OrderDto])
async def list_orders_v3_page(
    db: Annotated[AsyncSession, Depends(get_db)],
    page: Annotated[OffsetLimit, Depends(offset_limit_params)],
) -> list[OrderDto]:
    """V3.1 엔티티 → DTO, 페이징 고려.

    xToOne associations fetch-joined with offset/limit; the collection is
    loaded with batched IN-queries.
    """
    return await order_fetch_service.list_orders_v3_page(db, page)


@router.get("/v4/orders", response_model=list[OrderQueryDto])
async def list_orders_v4(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderQueryDto]:
    """V4. DTO 직접 조회 (1 + N)."""
    return await order_fetch_service.list_orders_v4(db)


@router.get("/v5/orders", response_model=list[OrderQueryDto])
async def list_orders_v5(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderQueryDto]:
    """V5. DTO 직접 조회, 컬렉션은 IN 절 한 번 (1 + 1)."""
    return await order_fetch_service.list_orders_v5(db)


@router.get("/v6/orders", response_model=list[OrderQueryDto])
async def list_orders_v6(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[OrderQueryDto]:
    """V6. 플랫 데이터 한 번 조회 후 메모리에서 주문 단위로 재조립 (1)."""
    return await order_fetch_service.list_orders_v6(db)


@router.post("/orders", response_model=OrderCreateResponse, status_code=201)
async def place_order(
    data: OrderCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OrderCreateResponse:
    """주문을 생성합니다.

    Place an order for one item, delivered to the member's address.
    """
    result: OrderCreateResponse = await order_service.place_order(db, data)
    await db.commit()
    return result


@router.post("/orders/{order_id}/cancel", response_model=OrderDto)
async def cancel_order(
    order_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OrderDto:
    """주문을 취소합니다. 배송 완료된 주문은 취소할 수 없습니다.

    Cancel an order and restore item stock.
    """
    result: OrderDto = await order_service.cancel_order(db, order_id)
    await db.commit()
    return result
