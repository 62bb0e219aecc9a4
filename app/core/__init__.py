"""Core 모듈"""

from app.core.config import settings
from app.core.database import Base, bounded_read, get_db
from app.core.exceptions import (
    BadRequestException,
    BaseAPIException,
    ConflictException,
    ErrorCode,
    ForbiddenException,
    InternalServerException,
    NotFoundException,
    ServiceUnavailableException,
    StorageUnavailableException,
    UnauthorizedException,
)
from app.core.logging import get_logger, setup_logging

__all__ = [
    "settings",
    "Base",
    "get_db",
    "bounded_read",
    "ErrorCode",
    "BaseAPIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "InternalServerException",
    "ServiceUnavailableException",
    "StorageUnavailableException",
    "get_logger",
    "setup_logging",
]
