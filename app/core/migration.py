"""마이그레이션 자동 실행 유틸리티

서버 시작 시 Alembic 마이그레이션 상태를 확인하고, 설정에 따라
최신 버전으로 업그레이드합니다.
"""

from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def sync_database_url(url: Optional[str] = None) -> str:
    """asyncpg URL을 alembic용 psycopg2 URL로 변환"""
    url = url or settings.database_url
    return url.replace("+asyncpg", "+psycopg2")


def get_alembic_config() -> Config:
    """Alembic 설정 객체 반환"""
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    config.set_main_option("sqlalchemy.url", sync_database_url())
    return config


def get_current_revision() -> Optional[str]:
    """현재 데이터베이스의 마이그레이션 버전 (조회 실패 시 None)"""
    engine = create_engine(sync_database_url())
    try:
        with engine.connect() as conn:
            rev = MigrationContext.configure(conn).get_current_revision()
            return str(rev) if rev else None
    except SQLAlchemyError as e:
        logger.warning(f"현재 마이그레이션 버전 조회 실패: {e}")
        return None
    finally:
        engine.dispose()


def get_head_revision() -> Optional[str]:
    """최신 마이그레이션 버전 조회"""
    script = ScriptDirectory.from_config(get_alembic_config())
    head = script.get_current_head()
    return str(head) if head else None


def check_migration_status() -> dict:
    """마이그레이션 상태 확인

    Returns:
        dict: current (현재 버전), head (최신 버전), is_up_to_date (최신 여부)
    """
    current = get_current_revision()
    head = get_head_revision()
    return {
        "current": current,
        "head": head,
        "is_up_to_date": current == head,
    }


def run_migrations() -> bool:
    """head까지 업그레이드

    Returns:
        bool: 성공 여부
    """
    status = check_migration_status()
    if status["is_up_to_date"]:
        logger.info(f"✅ 마이그레이션이 최신 상태입니다 (revision: {status['current']})")
        return True

    logger.info(
        f"🔄 마이그레이션 업데이트 중... ({status['current']} → {status['head']})"
    )
    try:
        command.upgrade(get_alembic_config(), "head")
    except SQLAlchemyError:
        logger.exception("❌ 마이그레이션 실행 실패")
        return False

    logger.info(f"✅ 마이그레이션 완료 (revision: {status['head']})")
    return True


def run_migrations_on_startup(auto_migrate: bool = True) -> None:
    """서버 시작 시 마이그레이션 확인 및 실행

    Args:
        auto_migrate: True면 자동 업그레이드, False면 상태만 기록

    Raises:
        RuntimeError: 프로덕션 환경에서 업그레이드에 실패한 경우
    """
    status = check_migration_status()

    if status["is_up_to_date"]:
        logger.info(f"✅ 마이그레이션 상태: 최신 (revision: {status['current']})")
        return

    logger.warning(
        f"⚠️ 마이그레이션이 최신 상태가 아닙니다. "
        f"(현재: {status['current']}, 최신: {status['head']})"
    )
    if not auto_migrate:
        return

    if not run_migrations() and settings.is_production:
        raise RuntimeError("프로덕션 환경에서 마이그레이션 실패")
