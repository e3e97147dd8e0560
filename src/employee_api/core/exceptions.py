"""Domain-level exceptions for the employee service.

Low-level SQLAlchemy errors are translated into ``StoreError`` by the
repository so services and the HTTP layer never depend on the driver.
"""

from __future__ import annotations


class EmployeeServiceError(Exception):
    """Base class for employee service errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DuplicateResourceError(EmployeeServiceError):
    """Raised when an employee with the same email already exists."""

    def __init__(self, email: str):
        super().__init__(
            message=f"Employee already exists with given email: {email}",
            details={"email": email},
        )


class ResourceNotFoundError(EmployeeServiceError):
    """Raised when an employee id does not match any row."""

    def __init__(self, employee_id: int):
        super().__init__(
            message=f"Employee not found with given id: {employee_id}",
            details={"id": employee_id},
        )


class StoreError(EmployeeServiceError):
    """Raised when the persistence layer fails (connectivity, constraints)."""

    def __init__(self, operation: str, reason: str | None = None):
        message = f"Store operation '{operation}' failed"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message, details={"operation": operation, "reason": reason}
        )


__all__ = [
    "EmployeeServiceError",
    "DuplicateResourceError",
    "ResourceNotFoundError",
    "StoreError",
]
