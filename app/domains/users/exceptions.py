"""Users 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import ConflictException, NotFoundException


class UserErrorCode(str, Enum):
    """사용자 도메인 에러 코드"""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    USER_ALREADY_EXISTS = "USER_ALREADY_EXISTS"


class UserNotFoundException(NotFoundException):
    """사용자를 찾을 수 없는 경우"""

    def __init__(self, user_id: int | None = None):
        detail = {"user_id": user_id} if user_id else {}
        super().__init__(
            message="사용자를 찾을 수 없습니다.",
            error_code=UserErrorCode.USER_NOT_FOUND,
            detail=detail,
        )


class UserAlreadyExistsException(ConflictException):
    """username 또는 email이 다른 사용자와 중복되는 경우"""

    def __init__(self, field: str | None = None, value: str | None = None):
        detail = {field: value} if field else {}
        super().__init__(
            message="이미 사용 중인 사용자 정보입니다.",
            error_code=UserErrorCode.USER_ALREADY_EXISTS,
            detail=detail,
        )
