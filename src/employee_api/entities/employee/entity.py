"""Entity: Employee."""

from pydantic import Field

from src.employee_api.entities._base import Entity


class Employee(Entity):
    """Employee entity representing a person on the payroll.

    This is the domain model handed between the repository, the service
    and the HTTP layer. The id stays ``None`` until the store assigns one.
    """

    first_name: str = Field(
        min_length=1, max_length=255, description="Employee's first name"
    )
    last_name: str = Field(
        min_length=1, max_length=255, description="Employee's last name"
    )
    email: str = Field(
        min_length=1, max_length=255, description="Employee's email address"
    )
