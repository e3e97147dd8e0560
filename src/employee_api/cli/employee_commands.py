"""Employee record commands that run through the service layer."""

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.table import Table

from src.employee_api.core.exceptions import EmployeeServiceError
from src.employee_api.core.services import DbSessionService, EmployeeService
from src.employee_api.entities.employee import Employee, EmployeeRepository
from src.employee_api.runtime.context import get_config

console = Console()

employee_app = typer.Typer(help="Inspect and edit employee records")


@contextmanager
def _employee_service() -> Iterator[EmployeeService]:
    # The repository commits each write; domain rejections need no rollback
    database_service = DbSessionService(get_config())
    db = database_service.get_session()
    try:
        yield EmployeeService(EmployeeRepository(db))
    finally:
        db.close()
        database_service.dispose()


@employee_app.command("list")
def list_employees() -> None:
    """List all employees ordered by id."""
    try:
        with _employee_service() as service:
            employees = service.get_all_employees()
    except EmployeeServiceError as e:
        console.print(f"[red]❌ Failed to list employees: {e.message}[/red]")
        raise typer.Exit(code=1) from e

    if not employees:
        console.print("[yellow]No employees found[/yellow]")
        return

    table = Table(title="Employees")
    table.add_column("ID", style="cyan")
    table.add_column("First Name", style="magenta")
    table.add_column("Last Name", style="magenta")
    table.add_column("Email", style="blue")
    for employee in employees:
        table.add_row(
            str(employee.id), employee.first_name, employee.last_name, employee.email
        )

    console.print(table)
    console.print(f"\n[green]Found {len(employees)} employees[/green]")


@employee_app.command("add")
def add_employee(
    first_name: str = typer.Option(..., "--first-name", "-f", help="First name"),
    last_name: str = typer.Option(..., "--last-name", "-l", help="Last name"),
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
) -> None:
    """Create an employee; the email must not be in use."""
    try:
        employee = Employee(first_name=first_name, last_name=last_name, email=email)
    except ValueError as e:
        console.print(f"[red]❌ Invalid employee: {e}[/red]")
        raise typer.Exit(code=2) from e

    try:
        with _employee_service() as service:
            saved = service.save_employee(employee)
    except EmployeeServiceError as e:
        console.print(f"[red]❌ {e.message}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Created employee {saved.id}[/green]")


@employee_app.command("delete")
def delete_employee(
    employee_id: int = typer.Argument(..., help="Id of the employee to delete"),
) -> None:
    """Delete an employee; unknown ids are ignored."""
    try:
        with _employee_service() as service:
            service.delete_employee(employee_id)
    except EmployeeServiceError as e:
        console.print(f"[red]❌ {e.message}[/red]")
        raise typer.Exit(code=1) from e

    console.print("[green]✅ Employee deleted successfully![/green]")
