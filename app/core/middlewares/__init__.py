"""미들웨어 모듈"""

from app.core.middlewares.context import (
    clear_context,
    generate_request_id,
    get_caller_id,
    get_request_id,
    set_caller_id,
    set_request_id,
)
from app.core.middlewares.logging import LoggingMiddleware

__all__ = [
    "LoggingMiddleware",
    "get_request_id",
    "set_request_id",
    "generate_request_id",
    "get_caller_id",
    "set_caller_id",
    "clear_context",
]
