"""Employee database table model."""

from sqlmodel import Field

from src.employee_api.entities._base import EntityTable


class EmployeeTable(EntityTable, table=True):
    """Database persistence model for employees.

    This represents how the Employee entity is stored in the database.
    ``email`` is indexed for lookups but not unique; duplicate
    detection happens in the service layer.
    """

    __tablename__ = "employees"

    first_name: str = Field(max_length=255, nullable=False)
    last_name: str = Field(max_length=255, nullable=False)
    email: str = Field(max_length=255, nullable=False, index=True)
