"""요청 컨텍스트 관리 (요청 ID, 호출자 ID)"""

import contextvars
import uuid
from typing import Optional

# 요청 ID를 저장하는 컨텍스트 변수
request_id_ctx: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_id", default=None
)

# 게이트웨이가 전달한 호출자 ID (X-User-Id)
caller_id_ctx: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "caller_id", default=None
)


def get_request_id() -> Optional[str]:
    """현재 요청 ID 반환"""
    return request_id_ctx.get()


def set_request_id(request_id: Optional[str] = None) -> str:
    """요청 ID 설정 (없으면 새로 생성)"""
    if request_id is None:
        request_id = generate_request_id()
    request_id_ctx.set(request_id)
    return request_id


def generate_request_id() -> str:
    """새 요청 ID 생성"""
    return str(uuid.uuid4())


def get_caller_id() -> Optional[str]:
    """현재 호출자 ID 반환 (로그용)"""
    return caller_id_ctx.get()


def set_caller_id(caller_id: Optional[str]) -> None:
    """호출자 ID 설정"""
    caller_id_ctx.set(caller_id)


def clear_context() -> None:
    """요청 종료 시 컨텍스트 초기화"""
    request_id_ctx.set(None)
    caller_id_ctx.set(None)
