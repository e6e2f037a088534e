"""주문 도메인 로직 및 레포지토리 조회 전략 테스트.

Domain and repository tests — stock bookkeeping, order totals, cancel rules,
flat-row regrouping, and the statement count of each repository strategy.
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.config import settings
from shop_api.models import Address, Book, Delivery, DeliveryStatus, Member, Order, OrderItem, OrderStatus
from shop_api.repositories.order_query_repository import order_query_repository
from shop_api.repositories.order_repository import OrderSearch, order_repository
from shop_api.repositories.order_simple_query_repository import order_simple_query_repository
from shop_api.schemas.order import AddressResponse
from shop_api.schemas.order_query import OrderFlatDto
from shop_api.services.order_fetch_service import order_fetch_service, regroup_flat_rows
from shop_api.utils.exceptions import BadRequestError, NotEnoughStockError
from shop_api.utils.pagination import OffsetLimit
from shop_api.utils.query_counter import count_queries
from tests.conftest import SeedIds


def _book(name: str, price: int, stock: int) -> Book:
    return Book(name=name, price=price, stock_quantity=stock)


def _order(*lines: tuple[Book, int]) -> Order:
    member = Member(name="userA", address=Address("Seoul", "1", "1111"))
    delivery = Delivery(address=Address("Seoul", "1", "1111"), status=DeliveryStatus.READY.value)
    order_items = [
        OrderItem.create_order_item(book, book.price, count) for book, count in lines
    ]
    return Order.create_order(member, delivery, *order_items)


class TestItemStock:
    """상품 재고 테스트."""

    def test_remove_stock(self):
        book = _book("JPA1 BOOK", 10000, 10)
        book.remove_stock(10)
        assert book.stock_quantity == 0

    def test_remove_stock_below_zero(self):
        book = _book("JPA1 BOOK", 10000, 2)
        with pytest.raises(NotEnoughStockError) as exc_info:
            book.remove_stock(3)
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "need more stock"
        assert book.stock_quantity == 2

    def test_add_stock(self):
        book = _book("JPA1 BOOK", 10000, 2)
        book.add_stock(5)
        assert book.stock_quantity == 7


class TestOrderDomain:
    """주문 생성/취소/합계 테스트."""

    def test_create_order_removes_stock(self):
        jpa1, jpa2 = _book("JPA1 BOOK", 10000, 100), _book("JPA2 BOOK", 20000, 100)
        order = _order((jpa1, 1), (jpa2, 2))

        assert order.status == OrderStatus.ORDER.value
        assert [oi.item.name for oi in order.order_items] == ["JPA1 BOOK", "JPA2 BOOK"]
        assert all(oi.order is order for oi in order.order_items)
        assert order.member.orders == [order]
        assert order.delivery.order is order
        assert (jpa1.stock_quantity, jpa2.stock_quantity) == (99, 98)

    def test_total_price(self):
        order = _order((_book("JPA1 BOOK", 10000, 100), 1), (_book("JPA2 BOOK", 20000, 100), 2))
        assert order.total_price == 50000
        assert order.order_items[1].total_price == 40000

    def test_cancel_restores_stock(self):
        spring1 = _book("SPRING1 BOOK", 20000, 200)
        order = _order((spring1, 3))
        order.cancel()
        assert order.status == OrderStatus.CANCEL.value
        assert spring1.stock_quantity == 200

    def test_cancel_completed_delivery(self):
        spring1 = _book("SPRING1 BOOK", 20000, 200)
        order = _order((spring1, 3))
        order.delivery.status = DeliveryStatus.COMP.value

        with pytest.raises(BadRequestError):
            order.cancel()
        assert order.status == OrderStatus.ORDER.value
        assert spring1.stock_quantity == 197

    def test_cancel_twice(self):
        spring1 = _book("SPRING1 BOOK", 20000, 200)
        order = _order((spring1, 3))
        order.cancel()

        with pytest.raises(BadRequestError) as exc_info:
            order.cancel()
        assert exc_info.value.detail == "Order is already cancelled"
        assert order.status == OrderStatus.CANCEL.value
        assert spring1.stock_quantity == 200


class TestRegroupFlatRows:
    """플랫 행 재조립 테스트."""

    def _flat(self, order_id: int, item_name: str) -> OrderFlatDto:
        return OrderFlatDto(
            order_id=order_id,
            name=f"user{order_id}",
            order_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
            order_status=OrderStatus.ORDER,
            address=AddressResponse(city="Seoul", street="1", zipcode="1111"),
            item_name=item_name,
            order_price=1000,
            count=1,
        )

    def test_groups_by_order_in_arrival_order(self):
        flats = [
            self._flat(2, "B1"),
            self._flat(1, "A1"),
            self._flat(2, "B2"),
            self._flat(1, "A2"),
        ]
        orders = regroup_flat_rows(flats)
        assert [o.order_id for o in orders] == [2, 1]
        assert [i.item_name for i in orders[0].order_items] == ["B1", "B2"]
        assert [i.item_name for i in orders[1].order_items] == ["A1", "A2"]
        assert orders[0].order_items[0].order_id == 2

    def test_empty(self):
        assert regroup_flat_rows([]) == []


class TestOrderSearch:
    """주문 검색 레포지토리 테스트."""

    async def test_no_criteria_returns_all(self, db: AsyncSession, seeded: SeedIds):
        orders = await order_repository.find_all_by_search(db, OrderSearch())
        assert [o.id for o in orders] == seeded.order_ids

    async def test_wildcards_are_literal(self, db: AsyncSession, seeded: SeedIds):
        orders = await order_repository.find_all_by_search(db, OrderSearch(member_name="%"))
        assert orders == []

    async def test_combined_criteria(self, db: AsyncSession, seeded: SeedIds):
        search = OrderSearch(member_name="B", order_status=OrderStatus.ORDER)
        orders = await order_repository.find_all_by_search(db, search)
        assert [o.id for o in orders] == [seeded.order_ids[1]]

    async def test_results_are_capped(self, db: AsyncSession, seeded: SeedIds, monkeypatch):
        monkeypatch.setattr(settings, "ORDER_SEARCH_MAX_RESULTS", 1)
        orders = await order_repository.find_all_by_search(db, OrderSearch())
        assert [o.id for o in orders] == seeded.order_ids[:1]


class TestRepositoryQueryCounts:
    """레포지토리/서비스 단위 SQL 실행 횟수."""

    async def test_fetch_join_is_single_query(self, db: AsyncSession, seeded: SeedIds):
        with count_queries() as counter:
            orders = await order_repository.find_all_with_item(db)
        assert counter.count == 1
        assert len(orders) == 2
        assert orders[0].total_price == 50000

    async def test_member_delivery_join_is_single_query(self, db: AsyncSession, seeded: SeedIds):
        with count_queries() as counter:
            orders = await order_repository.find_all_with_member_delivery(db)
        assert counter.count == 1
        assert orders[0].member.name == "userA"
        assert orders[1].delivery.address == Address("Jinju", "2", "2222")

    async def test_paged_batch_loading(self, db: AsyncSession, seeded: SeedIds):
        with count_queries() as counter:
            dtos = await order_fetch_service.list_orders_v3_page(db, OffsetLimit(offset=0, limit=1))
        assert counter.count == 3
        assert [d.name for d in dtos] == ["userA"]

    async def test_projection_one_plus_n(self, db: AsyncSession, seeded: SeedIds):
        with count_queries() as counter:
            await order_query_repository.find_order_query_dtos(db)
        assert counter.count == 1 + len(seeded.order_ids)

    async def test_projection_in_clause(self, db: AsyncSession, seeded: SeedIds):
        with count_queries() as counter:
            dtos = await order_query_repository.find_all_by_dto_optimization(db)
        assert counter.count == 2
        assert [len(d.order_items) for d in dtos] == [2, 2]

    async def test_projection_in_clause_skipped_without_orders(self, db: AsyncSession):
        with count_queries() as counter:
            assert await order_query_repository.find_all_by_dto_optimization(db) == []
        assert counter.count == 1

    async def test_simple_projection(self, db: AsyncSession, seeded: SeedIds):
        with count_queries() as counter:
            dtos = await order_simple_query_repository.find_order_dtos(db)
        assert counter.count == 1
        assert [d.name for d in dtos] == ["userA", "userB"]

    async def test_counters_do_not_leak(self, db: AsyncSession, seeded: SeedIds):
        with count_queries() as outer:
            await order_repository.find_all(db)
            with count_queries() as inner:
                await order_repository.find_all(db)
        assert inner.count == 1
        assert outer.count == 1
