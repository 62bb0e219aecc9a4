"""Comments 도메인 서비스"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import bounded_read
from app.core.exceptions import ForbiddenException
from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.core.schemas import PageMeta
from app.core.utils.pagination import PageParams, paginate
from app.domains.articles.exceptions import ArticleNotFoundException
from app.domains.articles.models import Article
from app.domains.articles.repository import ArticleRepository
from app.domains.comments.exceptions import CommentNotFoundException
from app.domains.comments.models import Comment
from app.domains.comments.repository import CommentRepository
from app.domains.users.exceptions import UserNotFoundException
from app.domains.users.repository import UserRepository

logger = get_logger(__name__)


class CommentService:
    """댓글 서비스"""

    def __init__(
        self,
        session: AsyncSession,
        repository: Optional[CommentRepository] = None,
        article_repository: Optional[ArticleRepository] = None,
        user_repository: Optional[UserRepository] = None,
    ):
        self.repository = repository or CommentRepository(session)
        self.article_repository = article_repository or ArticleRepository(
            session
        )
        self.user_repository = user_repository or UserRepository(session)

    async def _get_article(self, slug: str) -> Article:
        article = await self.article_repository.get_by_slug(slug)
        if not article:
            raise ArticleNotFoundException(slug=slug)
        return article

    async def _get_owned(self, comment_id: int, user_id: int) -> Comment:
        comment = await self.repository.get_by_id(comment_id)
        if not comment:
            raise CommentNotFoundException(comment_id=comment_id)
        if comment.user_id != user_id:
            raise ForbiddenException(message="댓글 작성자만 수정할 수 있습니다.")
        return comment

    async def create_comment(
        self, slug: str, user_id: int, text: str
    ) -> Comment:
        """댓글 작성

        Raises:
            UserNotFoundException: 작성자가 동기화되지 않은 경우
            ArticleNotFoundException: 게시글이 없는 경우
        """
        if not await self.user_repository.get_by_id(user_id):
            raise UserNotFoundException(user_id=user_id)

        article = await self._get_article(slug)
        comment = await self.repository.create(
            Comment(article_id=article.id, user_id=user_id, comment=text)
        )

        logger.info(
            "Comment created",
            extra={
                "request_id": get_request_id(),
                "comment_id": comment.id,
                "article_id": article.id,
            },
        )
        return comment

    async def list_comments(
        self, slug: str, page: PageParams
    ) -> tuple[list[Comment], PageMeta]:
        """게시글 댓글 목록 (오프셋 페이지네이션)"""
        article = await self._get_article(slug)
        total_count = await bounded_read(
            self.repository.count_by_article(article.id),
            operation="comments.count",
        )
        comments = await bounded_read(
            self.repository.list_by_article(
                article.id, offset=page.offset, limit=page.limit
            ),
            operation="comments.find",
        )
        return list(comments), paginate(total_count, page.limit, page.offset)

    async def update_comment(
        self, comment_id: int, user_id: int, text: str
    ) -> Comment:
        """댓글 수정 (작성자만 가능)

        Raises:
            CommentNotFoundException: 댓글이 없는 경우
            ForbiddenException: 작성자가 아닌 경우
        """
        comment = await self._get_owned(comment_id, user_id)
        comment.comment = text
        return await self.repository.update(comment)

    async def delete_comment(self, comment_id: int, user_id: int) -> None:
        """댓글 삭제 (작성자만 가능)"""
        comment = await self._get_owned(comment_id, user_id)
        await self.repository.delete(comment)

        logger.info(
            "Comment deleted",
            extra={"request_id": get_request_id(), "comment_id": comment_id},
        )
