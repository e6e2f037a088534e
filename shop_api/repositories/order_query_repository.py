"""주문 조회 전용 레포지토리 — DTO 직접 프로젝션.

Order Query Repository — Projects DTOs straight from SELECT rows.
No entities are materialized, so nothing is tracked by the session and
no lazy loading can happen; the number of round-trips is fixed by the
method chosen.

Strategies:
    - find_order_query_dtos: 루트 1번 + 주문마다 주문상품 1번 (1 + N)
    - find_all_by_dto_optimization: 루트 1번 + IN 절 주문상품 1번 (2)
    - find_all_by_dto_flat: 전체 조인 1번, 주문상품 단위 행 (1, flat rows)
"""

from collections import defaultdict
from collections.abc import Iterable

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.models.delivery import Delivery
from shop_api.models.item import Item
from shop_api.models.member import Member
from shop_api.models.order import Order, OrderItem
from shop_api.schemas.order import AddressResponse
from shop_api.schemas.order_query import (
    OrderFlatDto,
    OrderItemQueryDto,
    OrderQueryDto,
)


def order_summary_query() -> Select:
    """주문 + 회원 이름 + 배송 주소 프로젝션 쿼리.

    Projection of order id, member name, order date, order status and
    delivery address columns, joined over the to-one associations.
    """
    return (
        select(
            Order.id.label("order_id"),
            Member.name.label("name"),
            Order.order_date.label("order_date"),
            Order.status.label("order_status"),
            Delivery.city.label("city"),
            Delivery.street.label("street"),
            Delivery.zipcode.label("zipcode"),
        )
        .select_from(Order)
        .join(Order.member)
        .join(Order.delivery)
        .order_by(Order.id)
    )


def _order_items_query() -> Select:
    return (
        select(
            OrderItem.order_id.label("order_id"),
            Item.name.label("item_name"),
            OrderItem.order_price.label("order_price"),
            OrderItem.count.label("count"),
        )
        .select_from(OrderItem)
        .join(OrderItem.item)
        .order_by(OrderItem.order_id, OrderItem.id)
    )


def _to_item_dtos(rows: Iterable[tuple]) -> list[OrderItemQueryDto]:
    return [
        OrderItemQueryDto(order_id=order_id, item_name=item_name, order_price=order_price, count=count)
        for order_id, item_name, order_price, count in rows
    ]


class OrderQueryRepository:
    """주문 DTO 프로젝션 쿼리를 담당하는 레포지토리.

    Repository building OrderQueryDto lists from column projections.
    """

    async def find_order_query_dtos(self, db: AsyncSession) -> list[OrderQueryDto]:
        """루트 조회 후 주문마다 주문 상품을 조회합니다 (1 + N).

        Query the order rows, then issue one order-item query per order.
        """
        orders: list[OrderQueryDto] = await self._find_orders(db)
        for order in orders:
            order.order_items = await self._find_order_items(db, order.order_id)
        return orders

    async def find_all_by_dto_optimization(self, db: AsyncSession) -> list[OrderQueryDto]:
        """루트 조회 후 IN 절 한 번으로 주문 상품을 모두 조회합니다.

        Query the order rows, then fetch every order item with a single
        ``IN (order ids)`` query and attach them by order id in memory.
        """
        orders: list[OrderQueryDto] = await self._find_orders(db)
        if not orders:
            return orders

        item_map: dict[int, list[OrderItemQueryDto]] = await self._find_order_item_map(
            db, [order.order_id for order in orders]
        )
        for order in orders:
            order.order_items = item_map.get(order.order_id, [])
        return orders

    async def find_all_by_dto_flat(self, db: AsyncSession) -> list[OrderFlatDto]:
        """주문/회원/배송/주문상품/상품을 한 번에 조인한 플랫 행을 조회합니다.

        Single five-table join returning one flat row per order item,
        ordered by order id then order item id.
        Orders without order items produce no row and are not returned.
        """
        query: Select = (
            select(
                Order.id,
                Member.name,
                Order.order_date,
                Order.status,
                Delivery.city,
                Delivery.street,
                Delivery.zipcode,
                Item.name,
                OrderItem.order_price,
                OrderItem.count,
            )
            .select_from(Order)
            .join(Order.member)
            .join(Order.delivery)
            .join(Order.order_items)
            .join(OrderItem.item)
            .order_by(Order.id, OrderItem.id)
        )
        result = await db.execute(query)
        return [
            OrderFlatDto(
                order_id=order_id,
                name=name,
                order_date=order_date,
                order_status=status,
                address=AddressResponse(city=city, street=street, zipcode=zipcode),
                item_name=item_name,
                order_price=order_price,
                count=count,
            )
            for (
                order_id, name, order_date, status, city, street, zipcode,
                item_name, order_price, count,
            ) in result.all()
        ]

    async def _find_orders(self, db: AsyncSession) -> list[OrderQueryDto]:
        result = await db.execute(order_summary_query())
        return [
            OrderQueryDto(
                order_id=order_id,
                name=name,
                order_date=order_date,
                order_status=status,
                address=AddressResponse(city=city, street=street, zipcode=zipcode),
            )
            for order_id, name, order_date, status, city, street, zipcode in result.all()
        ]

    async def _find_order_items(self, db: AsyncSession, order_id: int) -> list[OrderItemQueryDto]:
        result = await db.execute(_order_items_query().where(OrderItem.order_id == order_id))
        return _to_item_dtos(result.all())

    async def _find_order_item_map(
        self,
        db: AsyncSession,
        order_ids: list[int],
    ) -> dict[int, list[OrderItemQueryDto]]:
        result = await db.execute(_order_items_query().where(OrderItem.order_id.in_(order_ids)))
        item_map: dict[int, list[OrderItemQueryDto]] = defaultdict(list)
        for item in _to_item_dtos(result.all()):
            item_map[item.order_id].append(item)
        return item_map


# 싱글턴 인스턴스 — Singleton instance
order_query_repository: OrderQueryRepository = OrderQueryRepository()
