"""주문 요약 조회 레포지토리 — xToOne DTO 프로젝션.

Order Simple Query Repository — Projects OrderSimpleQueryDto rows
(order, member name, delivery address) in a single query.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.repositories.order_query_repository import order_summary_query
from shop_api.schemas.order import AddressResponse
from shop_api.schemas.order_query import OrderSimpleQueryDto


class OrderSimpleQueryRepository:
    """주문 요약 DTO를 직접 조회하는 레포지토리."""

    async def find_order_dtos(self, db: AsyncSession) -> list[OrderSimpleQueryDto]:
        """필요한 컬럼만 SELECT 하여 DTO로 바로 변환합니다.

        Select only the columns the response needs and build DTOs from them.
        """
        result = await db.execute(order_summary_query())
        return [
            OrderSimpleQueryDto(
                order_id=order_id,
                name=name,
                order_date=order_date,
                order_status=status,
                address=AddressResponse(city=city, street=street, zipcode=zipcode),
            )
            for order_id, name, order_date, status, city, street, zipcode in result.all()
        ]


# 싱글턴 인스턴스 — Singleton instance
order_simple_query_repository: OrderSimpleQueryRepository = OrderSimpleQueryRepository()
