"""Employee API router with CRUD operations."""

from fastapi import APIRouter, Depends, status

from src.employee_api.api.http.deps import get_employee_service
from src.employee_api.core.exceptions import ResourceNotFoundError
from src.employee_api.core.services import EmployeeService
from src.employee_api.entities.employee import Employee

router = APIRouter()


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
def create_employee(
    employee: Employee,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    """Create a new employee. The store always assigns the id."""
    return service.save_employee(employee.model_copy(update={"id": None}))


@router.get("", response_model=list[Employee])
def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> list[Employee]:
    """List all employees."""
    return service.get_all_employees()


@router.get("/{employee_id}", response_model=Employee)
def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    """Get an employee by ID."""
    employee = service.get_employee_by_id(employee_id)
    if employee is None:
        raise ResourceNotFoundError(employee_id)
    return employee


@router.put("/{employee_id}", response_model=Employee)
def update_employee(
    employee_id: int,
    employee_update: Employee,
    service: EmployeeService = Depends(get_employee_service),
) -> Employee:
    """Replace the names and email of an existing employee."""
    saved = service.get_employee_by_id(employee_id)
    if saved is None:
        raise ResourceNotFoundError(employee_id)

    # The stored id wins over any id in the body
    merged = saved.model_copy(
        update={
            "first_name": employee_update.first_name,
            "last_name": employee_update.last_name,
            "email": employee_update.email,
        }
    )
    return service.update_employee(merged)


@router.delete("/{employee_id}")
def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> dict[str, str]:
    """Delete an employee. Unknown ids succeed as well."""
    service.delete_employee(employee_id)
    return {"message": "Employee deleted successfully!"}
