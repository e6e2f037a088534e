"""상품 레포지토리 — 상품 조회.

Item Repository — Item lookups for placing orders.
"""

from shop_api.models.item import Item
from shop_api.repositories.base import BaseRepository


class ItemRepository(BaseRepository[Item]):
    """items 테이블(단일 테이블 상속)에 대한 레포지토리.

    Repository for the single-table items hierarchy. Lookups return the
    concrete subclass (Book, Album, Movie) according to ``dtype``.
    """

    def __init__(self) -> None:
        super().__init__(Item)


# 싱글턴 인스턴스 — Singleton instance
item_repository: ItemRepository = ItemRepository()
