"""Database initialization script."""

from src.employee_api.core.services import DbManageService, DbSessionService
from src.employee_api.runtime.context import get_config


def init_db() -> None:
    """Create all database tables for the current configuration."""
    database_service = DbSessionService(get_config())
    try:
        DbManageService(database_service.engine).create_all()
    finally:
        database_service.dispose()


if __name__ == "__main__":
    init_db()
