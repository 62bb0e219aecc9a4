"""Comments 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import NotFoundException


class CommentErrorCode(str, Enum):
    """댓글 도메인 에러 코드"""

    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"


class CommentNotFoundException(NotFoundException):
    """댓글을 찾을 수 없는 경우"""

    def __init__(self, comment_id: int | None = None):
        detail = {"comment_id": comment_id} if comment_id else {}
        super().__init__(
            message="댓글을 찾을 수 없습니다.",
            error_code=CommentErrorCode.COMMENT_NOT_FOUND,
            detail=detail,
        )
