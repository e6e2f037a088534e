"""주문 조회 전용 DTO 스키마 — 쿼리에서 직접 프로젝션되는 행.

Query-side DTO schemas projected directly from SELECT rows,
without materializing entities.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from shop_api.models.order import OrderStatus
from shop_api.schemas.order import AddressResponse


class OrderSimpleQueryDto(BaseModel):
    """주문 요약 프로젝션 — 주문 + 회원 이름 + 배송 주소 한 번에 조회."""

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressResponse


class OrderItemQueryDto(BaseModel):
    """주문 상품 프로젝션.

    Order line projection. ``order_id`` groups lines under their order
    and is excluded from serialization.
    """

    order_id: int | None = Field(default=None, exclude=True)
    item_name: str
    order_price: int
    count: int


class OrderQueryDto(BaseModel):
    """주문 프로젝션 — 주문 상품 목록은 별도 쿼리로 채워집니다.

    Order projection whose order lines are filled by a separate query
    or by regrouping flat rows.
    """

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressResponse
    order_items: list[OrderItemQueryDto] = Field(default_factory=list)


class OrderFlatDto(BaseModel):
    """주문 플랫 행 — 주문/회원/배송/주문상품/상품을 한 번에 조인한 결과.

    One denormalized row per order line from the five-table join.
    """

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressResponse
    item_name: str
    order_price: int
    count: int
