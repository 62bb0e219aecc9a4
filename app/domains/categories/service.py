"""Categories 도메인 서비스"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.domains.categories.exceptions import CategoryAlreadyExistsException
from app.domains.categories.models import Category
from app.domains.categories.repository import CategoryRepository

logger = get_logger(__name__)


class CategoryService:
    """카테고리 서비스"""

    def __init__(self, session: AsyncSession):
        self.repository = CategoryRepository(session)

    async def list_categories(self) -> list[Category]:
        return list(await self.repository.get_list())

    async def create_category(self, category_name: str) -> Category:
        """카테고리 생성

        Raises:
            CategoryAlreadyExistsException: 같은 이름이 이미 있는 경우
        """
        if await self.repository.get_by_name(category_name):
            raise CategoryAlreadyExistsException(category_name=category_name)

        category = await self.repository.create(
            Category(category_name=category_name)
        )

        logger.info(
            "Category created",
            extra={
                "request_id": get_request_id(),
                "category_id": category.id,
            },
        )
        return category
