"""배송 SQLAlchemy ORM 모델 정의.

Delivery SQLAlchemy ORM model definition.

Tables:
    - deliveries: 주문별 배송 정보 (One delivery per order)
"""

import enum

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from shop_api.database import Base
from shop_api.models.member import Address


class DeliveryStatus(str, enum.Enum):
    """배송 상태 — READY(준비), COMP(완료)."""

    READY = "READY"
    COMP = "COMP"


class Delivery(Base):
    """배송 모델 — 주문과 1:1로 연결되는 배송 정보.

    Delivery model — Shipping information attached one-to-one to an Order.
    The foreign key lives on the orders table.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        address: 배송 주소 (Embedded delivery address)
        status: 배송 상태 (READY | COMP)

    Relationships:
        order: 배송 대상 주문 (Owning order, back-reference)
    """

    __tablename__ = "deliveries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(20), nullable=True)
    # 배송 상태 — READY, COMP
    status: Mapped[str] = mapped_column(String(20), default=DeliveryStatus.READY.value)

    address: Mapped[Address] = composite(Address, "city", "street", "zipcode")

    order = relationship("Order", back_populates="delivery", uselist=False)
