"""회원 레포지토리 — 회원 조회.

Member Repository — Member lookups for placing orders and seeding.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from shop_api.models.member import Member
from shop_api.repositories.base import BaseRepository


class MemberRepository(BaseRepository[Member]):
    """members 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the members table.
    """

    def __init__(self) -> None:
        super().__init__(Member)

    async def count(self, db: AsyncSession) -> int:
        """전체 회원 수를 반환합니다 (시드 중복 방지용)."""
        query: Select = select(func.count()).select_from(Member)
        return (await db.execute(query)).scalar() or 0


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()
