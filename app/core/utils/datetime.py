"""날짜/시간 유틸리티"""

from datetime import datetime, timezone
from typing import Optional

UTC = timezone.utc


def now_utc() -> datetime:
    """현재 UTC 시간 반환"""
    return datetime.now(UTC)


def ensure_utc(dt: datetime) -> datetime:
    """timezone 정보가 없는 datetime은 UTC로 간주"""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def parse_iso(date_str: Optional[str]) -> Optional[datetime]:
    """ISO 8601 형식 문자열 파싱 (실패 시 None)

    "2024-01-31", "2024-01-31T10:00:00", "2024-01-31T10:00:00Z"
    형식을 모두 허용하며 결과는 UTC 기준입니다.
    """
    if not date_str or not date_str.strip():
        return None

    value = date_str.strip()
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"

    try:
        return ensure_utc(datetime.fromisoformat(value))
    except ValueError:
        return None
