"""Business service for employees."""

from loguru import logger

from src.employee_api.core.exceptions import DuplicateResourceError
from src.employee_api.entities.employee import Employee, EmployeeRepository


class EmployeeService:
    """Orchestrates repository calls and enforces email uniqueness on create.

    The service keeps no state between calls. The uniqueness check is a
    read followed by a write in separate statements, so two concurrent
    creates with the same email can both succeed.
    """

    def __init__(self, repository: EmployeeRepository) -> None:
        self._repository = repository

    def save_employee(self, employee: Employee) -> Employee:
        """Persist a new employee unless one already uses the same email.

        Raises:
            DuplicateResourceError: If the email is already taken.
            StoreError: If the store fails.
        """
        existing = self._repository.find_by_email(employee.email)
        if existing is not None:
            logger.warning(
                "Rejected employee with duplicate email",
                email=employee.email,
                existing_id=existing.id,
            )
            raise DuplicateResourceError(employee.email)

        saved = self._repository.save(employee)
        logger.info("Created employee {}", saved.id)
        return saved

    def get_all_employees(self) -> list[Employee]:
        return self._repository.find_all()

    def get_employee_by_id(self, employee_id: int) -> Employee | None:
        return self._repository.find_by_id(employee_id)

    def update_employee(self, employee: Employee) -> Employee:
        """Save the employee as given; existence is checked by the caller."""
        updated = self._repository.save(employee)
        logger.info("Updated employee {}", updated.id)
        return updated

    def delete_employee(self, employee_id: int) -> None:
        self._repository.delete_by_id(employee_id)
        logger.info("Deleted employee {}", employee_id)
