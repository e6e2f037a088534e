"""주문 관련 SQLAlchemy ORM 모델 정의.

Order-related SQLAlchemy ORM model definitions.
Order is the aggregate root: it owns the foreign keys to Member and Delivery
and cascades persistence to its Delivery and OrderItems. Every association is
lazy; callers pick a fetch strategy per query.

Tables:
    - orders: 주문 (Orders)
    - order_items: 주문 상품 (Order lines referencing an item)
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shop_api.database import Base
from shop_api.models.delivery import Delivery, DeliveryStatus
from shop_api.models.item import Item
from shop_api.models.member import Member
from shop_api.utils.exceptions import BadRequestError


class OrderStatus(str, enum.Enum):
    """주문 상태 — ORDER(주문), CANCEL(취소)."""

    ORDER = "ORDER"
    CANCEL = "CANCEL"


class Order(Base):
    """주문 모델 — 회원, 배송, 주문 상품을 묶는 애그리거트 루트.

    Order model — Aggregate root tying a member, a delivery and order items.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        member_id: 주문 회원 FK (Ordering member)
        delivery_id: 배송 FK (Delivery, one-to-one)
        order_date: 주문 일시 UTC (Order timestamp)
        status: 주문 상태 (ORDER | CANCEL)

    Relationships:
        member: 주문 회원 (many-to-one, lazy)
        delivery: 배송 정보 (one-to-one, lazy, cascade all)
        order_items: 주문 상품 목록 (one-to-many, lazy, cascade all + orphan)
    """

    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    member_id: Mapped[int] = mapped_column(Integer, ForeignKey("members.id"), nullable=False)
    delivery_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("deliveries.id"), unique=True, nullable=True)
    # 주문 일시 — Order timestamp (UTC)
    order_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    # 주문 상태 — ORDER, CANCEL
    status: Mapped[str] = mapped_column(String(20), default=OrderStatus.ORDER.value)

    member = relationship("Member", back_populates="orders")
    delivery = relationship("Delivery", back_populates="order", cascade="all")
    order_items = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )

    # ------------------------------------------------------------------
    # 생성 메서드 — Factory
    # ------------------------------------------------------------------
    @classmethod
    def create_order(
        cls,
        member: Member,
        delivery: Delivery,
        *order_items: "OrderItem",
    ) -> "Order":
        """주문을 생성하고 연관관계를 모두 연결합니다.

        Create an order in ORDER status linked to its member, delivery and items.
        """
        order = cls(
            member=member,
            delivery=delivery,
            status=OrderStatus.ORDER.value,
            order_date=datetime.now(timezone.utc),
        )
        for order_item in order_items:
            order.add_order_item(order_item)
        return order

    def add_order_item(self, order_item: "OrderItem") -> None:
        self.order_items.append(order_item)

    # ------------------------------------------------------------------
    # 비즈니스 로직 — Business logic (associations must be loaded)
    # ------------------------------------------------------------------
    def cancel(self) -> None:
        """주문을 취소하고 재고를 복구합니다.

        Cancel the order and restore item stock.

        Raises:
            BadRequestError: 이미 취소된 주문, 배송완료된 주문
                (Already cancelled, or delivery already complete)
        """
        if self.status == OrderStatus.CANCEL.value:
            raise BadRequestError("Order is already cancelled")
        if self.delivery is not None and self.delivery.status == DeliveryStatus.COMP:
            raise BadRequestError("Orders whose delivery is complete cannot be cancelled")

        self.status = OrderStatus.CANCEL.value
        for order_item in self.order_items:
            order_item.cancel()

    @property
    def total_price(self) -> int:
        """전체 주문 가격 — Sum of order_price * count over all items."""
        return sum(order_item.total_price for order_item in self.order_items)


class OrderItem(Base):
    """주문 상품 모델 — 주문 시점의 가격과 수량.

    OrderItem model — One order line with the price at order time and a count.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        order_id: 주문 FK (Parent order)
        item_id: 상품 FK (Ordered item)
        order_price: 주문 가격 (Unit price at order time)
        count: 주문 수량 (Ordered quantity)
    """

    __tablename__ = "order_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    item_id: Mapped[int] = mapped_column(Integer, ForeignKey("items.id"), nullable=False)
    order_price: Mapped[int] = mapped_column(Integer, nullable=False)
    count: Mapped[int] = mapped_column(Integer, nullable=False)

    order = relationship("Order", back_populates="order_items")
    item = relationship("Item")

    @classmethod
    def create_order_item(cls, item: Item, order_price: int, count: int) -> "OrderItem":
        """주문 상품을 생성하고 상품 재고를 차감합니다.

        Create an order line and remove ``count`` from the item's stock.

        Raises:
            NotEnoughStockError: 재고 부족 (Not enough stock)
        """
        item.remove_stock(count)
        return cls(item=item, order_price=order_price, count=count)

    def cancel(self) -> None:
        self.item.add_stock(self.count)

    @property
    def total_price(self) -> int:
        return self.order_price * self.count
