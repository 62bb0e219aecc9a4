"""Categories 도메인 모듈

게시글 분류용 카테고리를 관리하는 도메인입니다.
"""

from app.domains.categories.exceptions import (
    CategoryAlreadyExistsException,
    CategoryErrorCode,
    CategoryNotFoundException,
)
from app.domains.categories.models import Category

__all__ = [
    "Category",
    "CategoryErrorCode",
    "CategoryNotFoundException",
    "CategoryAlreadyExistsException",
]
