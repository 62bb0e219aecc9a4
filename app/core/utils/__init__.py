"""유틸리티 모듈"""

from app.core.utils.datetime import (
    UTC,
    ensure_utc,
    now_utc,
    parse_iso,
)
from app.core.utils.pagination import PageParams, coerce_int, paginate
from app.core.utils.time import measure_time

__all__ = [
    # datetime
    "UTC",
    "now_utc",
    "ensure_utc",
    "parse_iso",
    # pagination
    "PageParams",
    "coerce_int",
    "paginate",
    # time measurement
    "measure_time",
]
