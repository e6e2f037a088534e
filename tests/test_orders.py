"""주문 조회 API 테스트 — v1 ~ v6 조회 전략.

Order fetch API tests — v1 ~ v6 strategies return the same aggregate
with different round-trip counts (X-Query-Count header).
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.models import Address, Delivery, DeliveryStatus, Member, Order
from tests.conftest import SeedIds


class TestOrderEntityExposure:
    """V1 엔티티 직접 노출 테스트."""

    async def test_v1_serializes_initialized_associations(self, client: AsyncClient, seeded: SeedIds):
        """지연 로딩 연관관계가 모두 초기화되어 직렬화됨."""
        res = await client.get("/api/v1/orders")
        assert res.status_code == 200
        data = res.json()
        assert len(data) == 2

        first = data[0]
        assert first["status"] == "ORDER"
        assert first["member"]["name"] == "userA"
        assert first["member"]["address"] == {"city": "Seoul", "street": "1", "zipcode": "1111"}
        assert first["delivery"]["status"] == "READY"
        assert [oi["item"]["name"] for oi in first["order_items"]] == ["JPA1 BOOK", "JPA2 BOOK"]
        assert first["order_items"][1]["count"] == 2

    async def test_v1_omits_back_references(self, client: AsyncClient, seeded: SeedIds):
        """양방향 연관관계의 반대편은 노출되지 않음 (무한 순환 방지)."""
        data = (await client.get("/api/v1/orders")).json()
        assert "orders" not in data[0]["member"]
        assert "order" not in data[0]["delivery"]
        assert "order" not in data[0]["order_items"][0]


class TestOrderDtos:
    """V2 ~ V3.1 엔티티 → DTO 테스트."""

    async def test_v2_maps_to_dtos(self, client: AsyncClient, seeded: SeedIds):
        res = await client.get("/api/v2/orders")
        assert res.status_code == 200
        data = res.json()
        assert [o["name"] for o in data] == ["userA", "userB"]
        assert data[1]["address"]["city"] == "Jinju"
        assert data[1]["order_items"] == [
            {"item_name": "SPRING1 BOOK", "order_price": 20000, "count": 3},
            {"item_name": "SPRING2 BOOK", "order_price": 40000, "count": 4},
        ]

    async def test_v3_fetch_join_does_not_duplicate_orders(self, client: AsyncClient, seeded: SeedIds):
        """컬렉션 페치 조인 결과가 주문 단위로 중복 제거됨."""
        data = (await client.get("/api/v3/orders")).json()
        assert [o["order_id"] for o in data] == seeded.order_ids
        assert all(len(o["order_items"]) == 2 for o in data)

    async def test_v2_and_v3_return_same_payload(self, client: AsyncClient, seeded: SeedIds):
        v2 = (await client.get("/api/v2/orders")).json()
        v3 = (await client.get("/api/v3/orders")).json()
        v3_page = (await client.get("/api/v3.1/orders")).json()
        assert v2 == v3 == v3_page

    async def test_v3_page_offset_limit(self, client: AsyncClient, seeded: SeedIds):
        """offset/limit가 주문 행 기준으로 적용됨."""
        res = await client.get("/api/v3.1/orders", params={"offset": 1, "limit": 100})
        assert res.status_code == 200
        data = res.json()
        assert len(data) == 1
        assert data[0]["name"] == "userB"
        assert len(data[0]["order_items"]) == 2

        res = await client.get("/api/v3.1/orders", params={"offset": 0, "limit": 1})
        assert [o["name"] for o in res.json()] == ["userA"]

    async def test_v3_page_beyond_last_row(self, client: AsyncClient, seeded: SeedIds):
        res = await client.get("/api/v3.1/orders", params={"offset": 10})
        assert res.status_code == 200
        assert res.json() == []

    @pytest.mark.parametrize("params", [{"offset": -1}, {"limit": 0}, {"limit": 100000}])
    async def test_v3_page_invalid_params(self, client: AsyncClient, params):
        """범위를 벗어난 페이지 파라미터는 422."""
        res = await client.get("/api/v3.1/orders", params=params)
        assert res.status_code == 422


class TestOrderQueryDtos:
    """V4 ~ V6 DTO 직접 조회 테스트."""

    async def test_v4_v5_v6_return_same_payload(self, client: AsyncClient, seeded: SeedIds):
        v4 = (await client.get("/api/v4/orders")).json()
        v5 = (await client.get("/api/v5/orders")).json()
        v6 = (await client.get("/api/v6/orders")).json()
        assert v4 == v5 == v6
        assert [o["name"] for o in v6] == ["userA", "userB"]

    async def test_query_dtos_hide_order_id_on_items(self, client: AsyncClient, seeded: SeedIds):
        data = (await client.get("/api/v5/orders")).json()
        assert data[0]["order_items"][0] == {
            "item_name": "JPA1 BOOK",
            "order_price": 10000,
            "count": 1,
        }

    async def test_projections_match_entity_dtos(self, client: AsyncClient, seeded: SeedIds):
        """DTO 직접 조회와 엔티티 → DTO 결과가 같은 모양."""
        v3 = (await client.get("/api/v3/orders")).json()
        v6 = (await client.get("/api/v6/orders")).json()
        assert v3 == v6

    @pytest.mark.parametrize("version", ["v1", "v2", "v3", "v3.1", "v4", "v5", "v6"])
    async def test_empty_database(self, client: AsyncClient, version: str):
        res = await client.get(f"/api/{version}/orders")
        assert res.status_code == 200
        assert res.json() == []


class TestOrderWithoutItems:
    """주문 상품이 없는 주문 — 컬렉션 조인 전략에서는 제외됨."""

    @pytest_asyncio.fixture
    async def empty_order_id(self, db: AsyncSession, seeded: SeedIds) -> int:
        member = Member(name="userC", address=Address("Busan", "3", "3333"))
        delivery = Delivery(address=Address("Busan", "3", "3333"), status=DeliveryStatus.READY.value)
        order = Order.create_order(member, delivery)
        db.add(order)
        await db.commit()
        return order.id

    @pytest.mark.parametrize("version", ["v1", "v2", "v3.1", "v4", "v5"])
    async def test_listed_with_empty_items(self, client: AsyncClient, empty_order_id: int, version: str):
        data = (await client.get(f"/api/{version}/orders")).json()
        assert len(data) == 3
        assert data[2]["order_items"] == []

    @pytest.mark.parametrize("version", ["v3", "v6"])
    async def test_dropped_by_item_join(self, client: AsyncClient, empty_order_id: int, version: str):
        data = (await client.get(f"/api/{version}/orders")).json()
        assert len(data) == 2
        assert empty_order_id not in [o["order_id"] for o in data]

    async def test_simple_orders_include_it(self, client: AsyncClient, empty_order_id: int):
        data = (await client.get("/api/v4/simple-orders")).json()
        assert [o["order_id"] for o in data][-1] == empty_order_id


class TestQueryCounts:
    """전략별 SQL 실행 횟수 (주문 2건, 주문당 상품 2개)."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            # 1 + 주문마다 (회원 1 + 배송 1 + 주문상품 1 + 상품 2)
            ("/api/v1/orders", 11),
            ("/api/v2/orders", 11),
            ("/api/v3/orders", 1),
            # 주문+회원+배송 1, 주문상품 IN 1, 상품 IN 1
            ("/api/v3.1/orders", 3),
            ("/api/v4/orders", 3),
            ("/api/v5/orders", 2),
            ("/api/v6/orders", 1),
        ],
    )
    async def test_query_count_header(self, client: AsyncClient, seeded: SeedIds, path: str, expected: int):
        res = await client.get(path)
        assert res.status_code == 200
        assert res.headers["X-Query-Count"] == str(expected)

    async def test_health_has_no_queries(self, client: AsyncClient):
        res = await client.get("/health")
        assert res.status_code == 200
        assert res.json() == {"status": "ok"}
        assert res.headers["X-Query-Count"] == "0"
