"""Comments 도메인 리포지토리"""

from typing import Optional, Sequence, cast

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.domains.comments.models import Comment


class CommentRepository:
    """댓글 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, comment_id: int) -> Optional[Comment]:
        """ID로 댓글 조회 (작성자 포함)"""
        result = await self.session.execute(
            select(Comment)
            .where(Comment.id == comment_id)
            .options(selectinload(Comment.author))
        )
        return cast(Optional[Comment], result.scalar_one_or_none())

    async def list_by_article(
        self, article_id: int, offset: int, limit: int
    ) -> Sequence[Comment]:
        """게시글의 댓글 목록 (작성 순)"""
        result = await self.session.execute(
            select(Comment)
            .where(Comment.article_id == article_id)
            .options(selectinload(Comment.author))
            .order_by(Comment.created_at.asc(), Comment.id.asc())
            .offset(offset)
            .limit(limit)
        )
        return cast(Sequence[Comment], result.scalars().all())

    async def count_by_article(self, article_id: int) -> int:
        result = await self.session.execute(
            select(func.count(Comment.id)).where(
                Comment.article_id == article_id
            )
        )
        return int(result.scalar_one())

    async def _reload(self, comment_id: int) -> Comment:
        result = await self.session.execute(
            select(Comment)
            .where(Comment.id == comment_id)
            .options(selectinload(Comment.author))
            .execution_options(populate_existing=True)
        )
        return cast(Comment, result.scalar_one())

    async def create(self, comment: Comment) -> Comment:
        """댓글 생성"""
        self.session.add(comment)
        await self.session.flush()
        return await self._reload(comment.id)

    async def update(self, comment: Comment) -> Comment:
        """댓글 수정"""
        await self.session.flush()
        return await self._reload(comment.id)

    async def delete(self, comment: Comment) -> None:
        """댓글 삭제"""
        await self.session.delete(comment)
        await self.session.flush()
