"""Categories 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import ConflictException, NotFoundException


class CategoryErrorCode(str, Enum):
    """카테고리 도메인 에러 코드"""

    CATEGORY_NOT_FOUND = "CATEGORY_NOT_FOUND"
    CATEGORY_ALREADY_EXISTS = "CATEGORY_ALREADY_EXISTS"


class CategoryNotFoundException(NotFoundException):
    """카테고리를 찾을 수 없는 경우"""

    def __init__(self, category_id: int | None = None):
        detail = {"category_id": category_id} if category_id else {}
        super().__init__(
            message="카테고리를 찾을 수 없습니다.",
            error_code=CategoryErrorCode.CATEGORY_NOT_FOUND,
            detail=detail,
        )


class CategoryAlreadyExistsException(ConflictException):
    """같은 이름의 카테고리가 이미 있는 경우"""

    def __init__(self, category_name: str | None = None):
        detail = {"category_name": category_name} if category_name else {}
        super().__init__(
            message="이미 존재하는 카테고리입니다.",
            error_code=CategoryErrorCode.CATEGORY_ALREADY_EXISTS,
            detail=detail,
        )
