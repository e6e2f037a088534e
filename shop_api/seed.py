"""초기 데이터 시드 스크립트 — 회원, 도서, 주문 생성.

Seed script — Creates sample members, books and orders.
Run this script once to bootstrap the database with demo data for
comparing the order fetch strategies.

Usage:
    python -m shop_api.seed

Creates:
    - userA: JPA1 BOOK x1, JPA2 BOOK x2 주문 (one order, two lines)
    - userB: SPRING1 BOOK x3, SPRING2 BOOK x4 주문 (one order, two lines)
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.database import Base, async_session, engine
from shop_api.models import Address, Book, Delivery, DeliveryStatus, Member, Order, OrderItem
from shop_api.repositories.member_repository import member_repository

# (회원 이름, 주소, [(도서명, 가격, 재고, 주문 수량), ...])
# (member name, address, [(book name, price, stock, ordered count), ...])
SEED_ORDERS: list[tuple[str, Address, list[tuple[str, int, int, int]]]] = [
    (
        "userA",
        Address(city="Seoul", street="1", zipcode="1111"),
        [("JPA1 BOOK", 10000, 100, 1), ("JPA2 BOOK", 20000, 100, 2)],
    ),
    (
        "userB",
        Address(city="Jinju", street="2", zipcode="2222"),
        [("SPRING1 BOOK", 20000, 200, 3), ("SPRING2 BOOK", 40000, 300, 4)],
    ),
]


async def insert_seed_orders(db: AsyncSession) -> list[Order]:
    """시드 회원/도서/주문을 추가합니다 (커밋은 호출자 책임).

    Add the seed members, books and orders to the session and flush.
    The caller commits.

    Returns:
        list[Order]: 생성된 주문 목록 (Created orders)
    """
    orders: list[Order] = []
    for member_name, address, lines in SEED_ORDERS:
        member = Member(name=member_name, address=Address(address.city, address.street, address.zipcode))
        db.add(member)

        order_items: list[OrderItem] = []
        for book_name, price, stock, count in lines:
            book = Book(name=book_name, price=price, stock_quantity=stock)
            db.add(book)
            order_items.append(OrderItem.create_order_item(book, price, count))

        delivery = Delivery(
            address=Address(address.city, address.street, address.zipcode),
            status=DeliveryStatus.READY.value,
        )
        order = Order.create_order(member, delivery, *order_items)
        db.add(order)
        orders.append(order)

    await db.flush()
    return orders


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Create tables if they don't exist, then insert the seed orders.

    Idempotent: 회원이 이미 있으면 건너뜁니다 (Skips if members already exist).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        if await member_repository.count(db) > 0:
            print("Already seeded. Skipping.")
            return

        orders = await insert_seed_orders(db)
        await db.commit()
        print(f"Seeded {len(orders)} orders.")


if __name__ == "__main__":
    asyncio.run(seed())
