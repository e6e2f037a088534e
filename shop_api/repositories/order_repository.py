"""주문 레포지토리 — 엔티티 조회 전략별 쿼리.

Order Repository — Entity queries, one per fetch strategy.

Strategies:
    - find_all: 연관관계 로딩 없음, 사용 시점에 지연 로딩 (lazy, N+1 on access)
    - find_all_by_search: 회원 이름/주문 상태 동적 검색 (dynamic search)
    - find_all_with_member_delivery: xToOne 페치 조인 + 페이징,
      컬렉션은 IN 배치 로딩 (to-one fetch join, paging, batched collections)
    - find_all_with_item: 컬렉션까지 한 번에 페치 조인, 페이징 불가
      (single fetch join including the collection, no paging)
"""

from dataclasses import dataclass

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager, joinedload, selectinload

from shop_api.config import settings
from shop_api.models.member import Member
from shop_api.models.order import Order, OrderItem, OrderStatus
from shop_api.repositories.base import BaseRepository


@dataclass
class OrderSearch:
    """주문 검색 조건.

    Order search criteria. Unset fields do not filter.

    Attributes:
        member_name: 회원 이름 부분 일치 (Member name substring)
        order_status: 주문 상태 (ORDER | CANCEL)
    """

    member_name: str | None = None
    order_status: OrderStatus | None = None


class OrderRepository(BaseRepository[Order]):
    """orders 테이블에 대한 엔티티 조회 레포지토리.

    Repository returning Order entities with different association loading.
    """

    def __init__(self) -> None:
        super().__init__(Order)

    async def find_all(self, db: AsyncSession) -> list[Order]:
        """모든 주문을 연관관계 없이 조회합니다.

        Retrieve all orders; member, delivery and order items stay unloaded.
        """
        return list(await self.get_all(db, order_by=Order.id))

    async def find_all_by_search(
        self,
        db: AsyncSession,
        search: OrderSearch,
    ) -> list[Order]:
        """검색 조건으로 주문을 조회합니다 (최대 ORDER_SEARCH_MAX_RESULTS건).

        Retrieve orders matching the search, capped at ORDER_SEARCH_MAX_RESULTS.
        The member join filters only; it does not populate Order.member.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            search: 검색 조건 (Search criteria)

        Returns:
            list[Order]: 주문 목록 (Matching orders)
        """
        query: Select = select(Order).join(Order.member)

        if search.order_status is not None:
            query = query.where(Order.status == search.order_status.value)
        if search.member_name:
            query = query.where(Member.name.contains(search.member_name, autoescape=True))

        query = query.order_by(Order.id).limit(settings.ORDER_SEARCH_MAX_RESULTS)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_all_with_member_delivery(
        self,
        db: AsyncSession,
        offset: int | None = None,
        limit: int | None = None,
        with_items: bool = False,
    ) -> list[Order]:
        """회원/배송을 페치 조인으로 한 번에 조회합니다.

        Fetch-join member and delivery into the order rows. xToOne joins do not
        multiply rows, so offset/limit apply to orders safely. With
        ``with_items``, order items and their items are loaded afterwards with
        one IN-query per level instead of one query per order.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            offset: 건너뛸 주문 수 (Orders to skip)
            limit: 최대 주문 수 (Maximum orders)
            with_items: 주문 상품 배치 로딩 여부 (Batch-load order items and items)

        Returns:
            list[Order]: 회원/배송이 로드된 주문 목록 (Orders with member/delivery loaded)
        """
        query: Select = (
            select(Order)
            .join(Order.member)
            .join(Order.delivery)
            .options(contains_eager(Order.member), contains_eager(Order.delivery))
            .order_by(Order.id)
        )
        if with_items:
            query = query.options(
                selectinload(Order.order_items).selectinload(OrderItem.item)
            )
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        result = await db.execute(query)
        return list(result.scalars().all())

    async def find_all_with_item(self, db: AsyncSession) -> list[Order]:
        """주문/회원/배송/주문상품/상품을 한 번의 쿼리로 조회합니다.

        Fetch-join every association in a single statement. The collection join
        repeats each order once per order item, so the result is made unique on
        the root entity. Paging cannot be applied to this query.
        Orders without order items are not returned (inner join).
        """
        query: Select = (
            select(Order)
            .join(Order.member)
            .join(Order.delivery)
            .join(Order.order_items)
            .join(OrderItem.item)
            .options(
                contains_eager(Order.member),
                contains_eager(Order.delivery),
                contains_eager(Order.order_items).contains_eager(OrderItem.item),
            )
            .order_by(Order.id, OrderItem.id)
        )
        result = await db.execute(query)
        return list(result.unique().scalars().all())

    async def find_one_with_details(
        self,
        db: AsyncSession,
        order_id: int,
    ) -> Order | None:
        """주문 하나를 모든 연관관계와 함께 조회합니다 (취소 처리용).

        Retrieve one order with every association loaded, as needed by cancel.
        """
        query: Select = (
            select(Order)
            .where(Order.id == order_id)
            .options(
                joinedload(Order.member),
                joinedload(Order.delivery),
                selectinload(Order.order_items).selectinload(OrderItem.item),
            )
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
order_repository: OrderRepository = OrderRepository()
