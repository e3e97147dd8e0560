"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.employee_api.api.http.app_data import ApplicationDependencies
from src.employee_api.core.services import EmployeeService
from src.employee_api.entities.employee import EmployeeRepository


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session that is closed once the request completes."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_employee_repository(
    db: Session = Depends(get_db_session),
) -> EmployeeRepository:
    return EmployeeRepository(db)


def get_employee_service(
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeService:
    return EmployeeService(repository)
