"""주문 요약 조회 서비스 — xToOne(회원, 배송) 관계 최적화.

Simple Order Fetch Service — Business logic behind /api/v*/simple-orders.
Only the to-one associations are involved:
    Order -> Member (many-to-one)
    Order -> Delivery (one-to-one)
"""

from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.models.order import Order
from shop_api.repositories.order_repository import OrderSearch, order_repository
from shop_api.repositories.order_simple_query_repository import order_simple_query_repository
from shop_api.schemas.entity import OrderEntity
from shop_api.schemas.order import AddressResponse, OrderSimpleDto
from shop_api.schemas.order_query import OrderSimpleQueryDto
from shop_api.services.order_fetch_service import initialize_associations


def to_order_simple_dto(order: Order) -> OrderSimpleDto:
    return OrderSimpleDto(
        order_id=order.id,
        name=order.member.name,
        order_date=order.order_date,
        order_status=order.status,
        address=AddressResponse.model_validate(order.delivery.address),
    )


class SimpleOrderFetchService:
    """주문 요약 조회 전략을 제공하는 서비스."""

    async def list_orders_v1(
        self,
        db: AsyncSession,
        search: OrderSearch,
    ) -> list[OrderEntity]:
        """검색 결과 엔티티를 직접 노출합니다.

        Expose searched entities directly. Member and delivery are initialized;
        order items are left unloaded and serialize as null.
        """
        orders: list[Order] = await order_repository.find_all_by_search(db, search)
        for order in orders:
            await initialize_associations(order, with_items=False)
        return [OrderEntity.model_validate(order) for order in orders]

    async def list_orders_v2(self, db: AsyncSession) -> list[OrderSimpleDto]:
        """엔티티 조회 후 DTO 변환, 회원/배송 지연 로딩 (1 + 2N).

        Map entities to DTOs, loading member and delivery lazily per order.
        """
        orders: list[Order] = await order_repository.find_all(db)
        result: list[OrderSimpleDto] = []
        for order in orders:
            await initialize_associations(order, with_items=False)
            result.append(to_order_simple_dto(order))
        return result

    async def list_orders_v3(self, db: AsyncSession) -> list[OrderSimpleDto]:
        """회원/배송 페치 조인으로 한 번에 조회합니다."""
        orders: list[Order] = await order_repository.find_all_with_member_delivery(db)
        return [to_order_simple_dto(order) for order in orders]

    async def list_orders_v4(self, db: AsyncSession) -> list[OrderSimpleQueryDto]:
        return await order_simple_query_repository.find_order_dtos(db)


# 싱글턴 인스턴스 — Singleton instance
simple_order_fetch_service: SimpleOrderFetchService = SimpleOrderFetchService()
