"""주문 조회 서비스 — 컬렉션(주문 상품)을 포함한 주문 조회 전략.

Order Fetch Service — Business logic behind the /api/v*/orders endpoints.
Each version fetches the same Order aggregate (member, delivery, order
items, items) with a different loading strategy and maps it to a response.

Versions:
    - v1: 엔티티 직접 노출 (entity exposure, lazy associations initialized)
    - v2: 엔티티 → DTO, 지연 로딩 (lazy loading per row, N+1)
    - v3: 엔티티 → DTO, 컬렉션 페치 조인 (single fetch join, no paging)
    - v3.1: xToOne 페치 조인 + 페이징 + 배치 로딩 (to-one join, paging, IN batches)
    - v4: DTO 직접 조회 (projection, 1 + N)
    - v5: DTO 직접 조회, IN 절 최적화 (projection, 2 queries)
    - v6: 플랫 데이터 한 번 조회 후 메모리 재조립 (flat rows regrouped, 1 query)
"""

from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.models.order import Order, OrderItem
from shop_api.repositories.order_query_repository import order_query_repository
from shop_api.repositories.order_repository import order_repository
from shop_api.schemas.entity import OrderEntity
from shop_api.schemas.order import AddressResponse, OrderDto, OrderItemDto
from shop_api.schemas.order_query import (
    OrderFlatDto,
    OrderItemQueryDto,
    OrderQueryDto,
)
from shop_api.utils.pagination import OffsetLimit


async def initialize_associations(order: Order, with_items: bool = True) -> None:
    """주문의 지연 로딩 연관관계를 강제로 초기화합니다.

    Force-load the lazy associations of one order. Each unloaded
    relationship costs one query, which is the N+1 pattern; attributes
    already loaded (or present in the identity map) cost nothing.
    """
    await order.awaitable_attrs.member
    await order.awaitable_attrs.delivery
    if with_items:
        order_items: list[OrderItem] = await order.awaitable_attrs.order_items
        for order_item in order_items:
            await order_item.awaitable_attrs.item


def to_order_item_dto(order_item: OrderItem) -> OrderItemDto:
    return OrderItemDto(
        item_name=order_item.item.name,
        order_price=order_item.order_price,
        count=order_item.count,
    )


def to_order_dto(order: Order) -> OrderDto:
    """주문 엔티티를 DTO로 변환합니다 (연관관계가 로드되어 있어야 함).

    Convert an Order whose associations are already loaded to an OrderDto.
    """
    return OrderDto(
        order_id=order.id,
        name=order.member.name,
        order_date=order.order_date,
        order_status=order.status,
        address=AddressResponse.model_validate(order.delivery.address),
        order_items=[to_order_item_dto(order_item) for order_item in order.order_items],
    )


def regroup_flat_rows(flats: list[OrderFlatDto]) -> list[OrderQueryDto]:
    """플랫 행을 주문 단위로 재조립합니다.

    Regroup flat order-item rows into one OrderQueryDto per order id,
    keeping orders and their items in the order the rows arrived.
    """
    grouped: dict[int, OrderQueryDto] = {}
    for flat in flats:
        order: OrderQueryDto | None = grouped.get(flat.order_id)
        if order is None:
            order = OrderQueryDto(
                order_id=flat.order_id,
                name=flat.name,
                order_date=flat.order_date,
                order_status=flat.order_status,
                address=flat.address,
            )
            grouped[flat.order_id] = order
        order.order_items.append(
            OrderItemQueryDto(
                order_id=flat.order_id,
                item_name=flat.item_name,
                order_price=flat.order_price,
                count=flat.count,
            )
        )
    return list(grouped.values())


class OrderFetchService:
    """주문 + 주문 상품 조회 전략을 제공하는 서비스.

    Service exposing one method per order fetch strategy.
    """

    async def list_orders_v1(self, db: AsyncSession) -> list[OrderEntity]:
        """엔티티를 직접 노출합니다.

        Expose entities directly. Every lazy association is initialized
        first so it is serialized; back-references are never serialized.
        """
        orders: list[Order] = await order_repository.find_all(db)
        for order in orders:
            await initialize_associations(order, with_items=True)
        return [OrderEntity.model_validate(order) for order in orders]

    async def list_orders_v2(self, db: AsyncSession) -> list[OrderDto]:
        """엔티티 조회 후 DTO 변환, 페치 조인 없음.

        Map entities to DTOs loading every association lazily (N+1 queries).
        """
        orders: list[Order] = await order_repository.find_all(db)
        result: list[OrderDto] = []
        for order in orders:
            await initialize_associations(order, with_items=True)
            result.append(to_order_dto(order))
        return result

    async def list_orders_v3(self, db: AsyncSession) -> list[OrderDto]:
        """컬렉션까지 페치 조인하여 한 번에 조회합니다 (페이징 불가).

        Map entities fetched with a single fetch join to DTOs.
        """
        orders: list[Order] = await order_repository.find_all_with_item(db)
        return [to_order_dto(order) for order in orders]

    async def list_orders_v3_page(
        self,
        db: AsyncSession,
        page: OffsetLimit,
    ) -> list[OrderDto]:
        """xToOne 페치 조인 + 페이징, 컬렉션은 IN 배치 로딩.

        Page over orders with member/delivery fetch-joined; order items and
        items are loaded with one IN-query each.
        """
        orders: list[Order] = await order_repository.find_all_with_member_delivery(
            db, offset=page.offset, limit=page.limit, with_items=True
        )
        return [to_order_dto(order) for order in orders]

    async def list_orders_v4(self, db: AsyncSession) -> list[OrderQueryDto]:
        return await order_query_repository.find_order_query_dtos(db)

    async def list_orders_v5(self, db: AsyncSession) -> list[OrderQueryDto]:
        return await order_query_repository.find_all_by_dto_optimization(db)

    async def list_orders_v6(self, db: AsyncSession) -> list[OrderQueryDto]:
        """플랫 행 한 번 조회 후 주문 단위로 재조립합니다.

        Single flat query, regrouped in memory into order DTOs.
        """
        flats: list[OrderFlatDto] = await order_query_repository.find_all_by_dto_flat(db)
        return regroup_flat_rows(flats)


# 싱글턴 인스턴스 — Singleton instance
order_fetch_service: OrderFetchService = OrderFetchService()
