"""회원 및 주소 관련 SQLAlchemy ORM 모델 정의.

Member and Address SQLAlchemy ORM model definitions.
Address is an embedded value object mapped as a composite over
city/street/zipcode columns; it is reused by Delivery.

Tables:
    - members: 회원 (Shop members who place orders)
"""

from dataclasses import dataclass

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, composite, mapped_column, relationship

from shop_api.database import Base


@dataclass
class Address:
    """주소 값 타입 — 회원/배송에 임베디드되는 값 객체.

    Address value object embedded into Member and Delivery rows.
    """

    city: str | None = None
    street: str | None = None
    zipcode: str | None = None


class Member(Base):
    """회원 모델 — 주문을 생성하는 사용자.

    Member model — The customer who places orders.

    Attributes:
        id: 고유 식별자 (Unique identifier, autoincrement)
        name: 회원 이름 (Member name)
        address: 회원 주소 (Embedded address)

    Relationships:
        orders: 회원의 주문 목록 (Orders placed by the member, back-reference)
    """

    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # 주소 컬럼 — Address columns backing the composite below
    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    street: Mapped[str | None] = mapped_column(String(255), nullable=True)
    zipcode: Mapped[str | None] = mapped_column(String(20), nullable=True)

    address: Mapped[Address] = composite(Address, "city", "street", "zipcode")

    # 관계 — Relationships (Order.member 가 연관관계의 주인)
    orders = relationship("Order", back_populates="member")
