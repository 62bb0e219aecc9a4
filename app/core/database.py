import asyncio
from typing import AsyncGenerator, Awaitable, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.config import settings
from app.core.exceptions import StorageUnavailableException
from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id

logger = get_logger(__name__)

T = TypeVar("T")

# 비동기 엔진 생성
engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
    pool_size=10,
    max_overflow=20,
)

# 비동기 세션 팩토리
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    """SQLAlchemy 모델 베이스 클래스"""

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """데이터베이스 세션 의존성"""
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def bounded_read(
    awaitable: Awaitable[T],
    timeout: Optional[float] = None,
    operation: str = "read",
) -> T:
    """저장소 조회를 제한 시간 안에서 실행

    재시도하지 않으며, 타임아웃과 SQLAlchemy 오류는 모두
    StorageUnavailableException으로 변환됩니다.

    Args:
        awaitable: 실행할 리포지토리 호출
        timeout: 제한 시간 (초), None이면 설정값 사용
        operation: 로그에 남길 작업 이름

    Returns:
        리포지토리 호출 결과

    Raises:
        StorageUnavailableException: 타임아웃 또는 데이터베이스 오류
    """
    limit = timeout if timeout is not None else settings.storage_timeout_seconds
    try:
        return await asyncio.wait_for(awaitable, timeout=limit)
    except asyncio.TimeoutError as e:
        logger.error(
            "Storage read timed out",
            extra={
                "request_id": get_request_id(),
                "operation": operation,
                "timeout": limit,
            },
        )
        raise StorageUnavailableException(
            detail={"operation": operation, "timeout": limit}
        ) from e
    except SQLAlchemyError as e:
        logger.exception(
            "Storage read failed",
            extra={
                "request_id": get_request_id(),
                "operation": operation,
                "exception_type": type(e).__name__,
            },
        )
        raise StorageUnavailableException(
            detail={"operation": operation}
        ) from e


async def close_db() -> None:
    """데이터베이스 연결 종료"""
    await engine.dispose()
