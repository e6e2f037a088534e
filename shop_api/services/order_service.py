"""주문 서비스 — 주문 생성/취소 비즈니스 로직.

Order Service — Business logic for placing and cancelling orders.
Callers own the transaction: the router commits after a successful call.
"""

import dataclasses

from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.models.delivery import Delivery, DeliveryStatus
from shop_api.models.item import Item
from shop_api.models.member import Member
from shop_api.models.order import Order, OrderItem
from shop_api.repositories.item_repository import item_repository
from shop_api.repositories.member_repository import member_repository
from shop_api.repositories.order_repository import order_repository
from shop_api.schemas.order import OrderCreate, OrderCreateResponse, OrderDto
from shop_api.services.order_fetch_service import to_order_dto
from shop_api.utils.exceptions import NotFoundError


class OrderService:
    """주문 명령을 처리하는 서비스.

    Service handling order commands.
    """

    async def place_order(
        self,
        db: AsyncSession,
        data: OrderCreate,
    ) -> OrderCreateResponse:
        """주문을 생성합니다.

        Place an order for one item. The delivery goes to the member's address
        and the order price is the item's current price.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 주문 생성 데이터 (Order creation data)

        Returns:
            OrderCreateResponse: 생성된 주문 ID (Created order id)

        Raises:
            NotFoundError: 회원 또는 상품이 없을 때 (Member or item not found)
            NotEnoughStockError: 재고 부족 (Not enough stock)
        """
        member: Member | None = await member_repository.get_by_id(db, data.member_id)
        if member is None:
            raise NotFoundError("Member not found")
        item: Item | None = await item_repository.get_by_id(db, data.item_id)
        if item is None:
            raise NotFoundError("Item not found")

        # 배송 정보 생성 — 회원 주소의 복사본 사용 (Copy of the member's address)
        delivery = Delivery(
            address=dataclasses.replace(member.address),
            status=DeliveryStatus.READY.value,
        )
        order_item: OrderItem = OrderItem.create_order_item(item, item.price, data.count)
        order: Order = Order.create_order(member, delivery, order_item)

        db.add(order)
        await db.flush()
        return OrderCreateResponse(order_id=order.id)

    async def cancel_order(
        self,
        db: AsyncSession,
        order_id: int,
    ) -> OrderDto:
        """주문을 취소하고 재고를 복구합니다.

        Cancel an order and restore the stock of its items.

        Raises:
            NotFoundError: 주문이 없을 때 (Order not found)
            BadRequestError: 배송 완료된 주문 (Delivery already complete)
        """
        order: Order | None = await order_repository.find_one_with_details(db, order_id)
        if order is None:
            raise NotFoundError("Order not found")

        order.cancel()
        await db.flush()
        return to_order_dto(order)


# 싱글턴 인스턴스 — Singleton instance
order_service: OrderService = OrderService()
