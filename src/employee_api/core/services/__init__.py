from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .employee_service import EmployeeService

__all__ = [
    "DbManageService",
    "DbSessionService",
    "EmployeeService",
]
