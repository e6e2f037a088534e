"""상품 SQLAlchemy ORM 모델 정의 (단일 테이블 상속).

Item SQLAlchemy ORM model definitions using single-table inheritance.
Book, Album and Movie share the items table and are distinguished by ``dtype``.

Tables:
    - items: 상품 (All item kinds, discriminator column ``dtype``)
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from shop_api.database import Base
from shop_api.utils.exceptions import NotEnoughStockError


class Item(Base):
    """상품 모델 — 재고를 가진 판매 단위.

    Item model — Sellable product with a stock quantity.

    Attributes:
        id: 고유 식별자 (Unique identifier)
        name: 상품명 (Item name)
        price: 가격 (Unit price)
        stock_quantity: 재고 수량 (Units in stock)
        dtype: 상품 구분 (Discriminator: I, B, A, M)
    """

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    dtype: Mapped[str] = mapped_column(String(31), nullable=False)

    __mapper_args__ = {"polymorphic_on": "dtype", "polymorphic_identity": "I"}

    def add_stock(self, quantity: int) -> None:
        """재고를 증가시킵니다 (주문 취소 시)."""
        self.stock_quantity += quantity

    def remove_stock(self, quantity: int) -> None:
        """재고를 감소시킵니다.

        Decrease the stock by ``quantity``.

        Raises:
            NotEnoughStockError: 남은 재고가 0 미만이 될 때 (Stock would go negative)
        """
        rest_stock: int = self.stock_quantity - quantity
        if rest_stock < 0:
            raise NotEnoughStockError("need more stock")
        self.stock_quantity = rest_stock


class Book(Item):
    """도서 — Book item."""

    author: Mapped[str | None] = mapped_column(String(255), nullable=True)
    isbn: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "B"}


class Album(Item):
    """음반 — Album item."""

    artist: Mapped[str | None] = mapped_column(String(255), nullable=True)
    etc: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "A"}


class Movie(Item):
    """영화 — Movie item."""

    director: Mapped[str | None] = mapped_column(String(255), nullable=True)
    actor: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "M"}
