"""Comments 도메인 모듈

게시글 댓글 작성/조회/수정/삭제를 담당합니다.
"""

from app.domains.comments.exceptions import (
    CommentErrorCode,
    CommentNotFoundException,
)
from app.domains.comments.models import Comment

__all__ = [
    "Comment",
    "CommentErrorCode",
    "CommentNotFoundException",
]
