"""Categories 도메인 스키마 정의"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CategoryCreateRequest(BaseModel):
    """카테고리 생성 요청"""

    category: str = Field(
        ..., min_length=3, max_length=30, description="카테고리 이름"
    )

    @field_validator("category")
    @classmethod
    def validate_category(cls, v: str) -> str:
        if v != v.strip():
            raise ValueError("카테고리 앞뒤 공백을 제거해 주세요.")
        return v


class CategoryResponse(BaseModel):
    """카테고리 응답"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    category_name: str
    created_at: datetime
