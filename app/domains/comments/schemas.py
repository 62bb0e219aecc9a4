"""Comments 도메인 스키마 정의"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.domains.users.schemas import AuthorSummary


class CommentCreateRequest(BaseModel):
    """댓글 작성 요청 (앞뒤 공백 제거 후 2자 이상)"""

    model_config = ConfigDict(str_strip_whitespace=True)

    comment: str = Field(..., min_length=2, description="댓글 내용")


class CommentUpdateRequest(BaseModel):
    """댓글 수정 요청"""

    model_config = ConfigDict(str_strip_whitespace=True)

    comment: str = Field(..., min_length=2, description="수정할 댓글 내용")


class CommentResponse(BaseModel):
    """댓글 응답"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    article_id: int
    user_id: int
    comment: str
    author: Optional[AuthorSummary] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
