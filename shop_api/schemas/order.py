"""주문 API Pydantic 요청/응답 스키마 정의.

Order API Pydantic request/response schema definitions.
Covers the DTOs built from Order entities (OrderDto, OrderSimpleDto),
the shared Address schema, and the order command payloads.
"""

import dataclasses
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from shop_api.models.order import OrderStatus


class AddressResponse(BaseModel):
    """주소 응답 스키마 — 임베디드 Address 값 객체.

    Address response schema built from the embedded Address value object.

    Attributes:
        city: 도시 (City)
        street: 거리 (Street)
        zipcode: 우편번호 (Zip code)
    """

    model_config = ConfigDict(from_attributes=True)

    city: str | None = None
    street: str | None = None
    zipcode: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_value_object(cls, data: Any) -> Any:
        if dataclasses.is_dataclass(data) and not isinstance(data, type):
            return dataclasses.asdict(data)
        return data


# === 엔티티 → DTO (Entity to DTO) ===

class OrderItemDto(BaseModel):
    """주문 상품 DTO — OrderItem 엔티티를 외부에 노출하지 않기 위한 응답.

    Order line DTO so the OrderItem entity itself is never exposed.

    Attributes:
        item_name: 상품명 (Item name)
        order_price: 주문 가격 (Unit price at order time)
        count: 주문 수량 (Ordered quantity)
    """

    item_name: str
    order_price: int
    count: int


class OrderDto(BaseModel):
    """주문 DTO — 주문 상품 컬렉션을 포함한 응답.

    Order DTO including its order lines.

    Attributes:
        order_id: 주문 ID (Order identifier)
        name: 회원 이름 (Member name)
        order_date: 주문 일시 (Order timestamp)
        order_status: 주문 상태 (ORDER | CANCEL)
        address: 배송 주소 (Delivery address)
        order_items: 주문 상품 목록 (Order lines)
    """

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressResponse
    order_items: list[OrderItemDto]


class OrderSimpleDto(BaseModel):
    """주문 요약 DTO — xToOne 관계(회원, 배송)만 포함.

    Order summary DTO with to-one associations only (member, delivery).
    """

    order_id: int
    name: str
    order_date: datetime
    order_status: OrderStatus
    address: AddressResponse


# === 주문 명령 (Order commands) ===

class OrderCreate(BaseModel):
    """주문 생성 요청 스키마.

    Order creation request schema. One item per order, priced at the
    item's current price and delivered to the member's address.

    Attributes:
        member_id: 주문 회원 ID (Ordering member)
        item_id: 상품 ID (Item to order)
        count: 주문 수량, 1 이상 (Quantity, at least 1)
    """

    member_id: int
    item_id: int
    count: int = Field(..., ge=1)


class OrderCreateResponse(BaseModel):
    """주문 생성 응답 스키마."""

    order_id: int
