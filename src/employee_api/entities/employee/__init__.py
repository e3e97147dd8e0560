"""Entity package: Employee."""

from .entity import Employee
from .repository import EmployeeRepository
from .table import EmployeeTable

__all__ = ["Employee", "EmployeeRepository", "EmployeeTable"]
