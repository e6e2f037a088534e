"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    member: 회원 및 주소 값 타입 (Member and embedded Address)
    delivery: 배송 (Delivery and DeliveryStatus)
    item: 상품 단일 테이블 상속 (Item, Book, Album, Movie)
    order: 주문 및 주문 상품 (Order, OrderItem and OrderStatus)
"""

from shop_api.models.member import Address, Member
from shop_api.models.delivery import Delivery, DeliveryStatus
from shop_api.models.item import Album, Book, Item, Movie
from shop_api.models.order import Order, OrderItem, OrderStatus

__all__ = [
    "Address", "Member",
    "Delivery", "DeliveryStatus",
    "Item", "Book", "Album", "Movie",
    "Order", "OrderItem", "OrderStatus",
]
