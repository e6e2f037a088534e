"""엔티티 직접 노출용 스키마 (v1 엔드포인트).

Entity exposure schemas used by the v1 endpoints.
They mirror the ORM entities field by field. Back-references
(Member.orders, Delivery.order, OrderItem.order) are left out so
serialization cannot loop, and relationships that were never loaded
are serialized as null instead of triggering a lazy load.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from sqlalchemy import inspect

from shop_api.database import Base
from shop_api.models.delivery import DeliveryStatus
from shop_api.models.order import OrderStatus
from shop_api.schemas.order import AddressResponse


class EntityModel(BaseModel):
    """ORM 엔티티 스냅샷의 베이스 모델.

    Base for entity snapshots. Reads mapped attributes off an ORM instance,
    replacing unloaded relationships with None.
    """

    model_config = ConfigDict(from_attributes=True)

    @model_validator(mode="before")
    @classmethod
    def _unloaded_relationships_as_none(cls, data: Any) -> Any:
        if not isinstance(data, Base):
            return data
        state = inspect(data)
        lazy: set[str] = state.unloaded & set(state.mapper.relationships.keys())
        return {
            name: None if name in lazy else getattr(data, name)
            for name in cls.model_fields
        }


class MemberEntity(EntityModel):
    id: int
    name: str
    address: AddressResponse | None = None


class DeliveryEntity(EntityModel):
    id: int
    address: AddressResponse | None = None
    status: DeliveryStatus


class ItemEntity(EntityModel):
    id: int
    name: str
    price: int
    stock_quantity: int


class OrderItemEntity(EntityModel):
    id: int
    item: ItemEntity | None = None
    order_price: int
    count: int


class OrderEntity(EntityModel):
    """주문 엔티티 스냅샷 — 회원/배송/주문상품 포함.

    Order entity snapshot. ``member``, ``delivery`` and ``order_items``
    are null when they were not initialized before serialization.
    """

    id: int
    member: MemberEntity | None = None
    order_items: list[OrderItemEntity] | None = None
    delivery: DeliveryEntity | None = None
    order_date: datetime
    status: OrderStatus
