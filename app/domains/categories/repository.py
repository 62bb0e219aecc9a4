"""Categories 도메인 리포지토리"""

from typing import Optional, Sequence, cast

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.categories.models import Category


class CategoryRepository:
    """카테고리 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, category_id: int) -> Optional[Category]:
        """ID로 카테고리 조회"""
        result = await self.session.execute(
            select(Category).where(Category.id == category_id)
        )
        return cast(Optional[Category], result.scalar_one_or_none())

    async def get_by_name(self, category_name: str) -> Optional[Category]:
        """이름으로 카테고리 조회 (대소문자 무시)"""
        result = await self.session.execute(
            select(Category).where(
                func.lower(Category.category_name) == category_name.lower()
            )
        )
        return cast(Optional[Category], result.scalar_one_or_none())

    async def get_list(self) -> Sequence[Category]:
        """전체 카테고리 목록 (이름순)"""
        result = await self.session.execute(
            select(Category).order_by(Category.category_name.asc())
        )
        return cast(Sequence[Category], result.scalars().all())

    async def create(self, category: Category) -> Category:
        """카테고리 생성"""
        self.session.add(category)
        await self.session.flush()
        await self.session.refresh(category)
        return category
