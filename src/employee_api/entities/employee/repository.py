"""Employee repository for data access operations."""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import bindparam, delete, func, text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from src.employee_api.core.exceptions import StoreError
from src.employee_api.entities.employee.entity import Employee
from src.employee_api.entities.employee.table import EmployeeTable

_COLUMNS = "id, first_name, last_name, email"

# Primary keys are signed 64-bit integers; larger ids cannot name a row
_ID_MIN = -(2**63)
_ID_MAX = 2**63 - 1


def _positional_placeholders(paramstyle: str, count: int) -> list[str]:
    """Return driver-native positional placeholders for ``count`` parameters."""
    if paramstyle == "qmark":
        return ["?"] * count
    if paramstyle in ("format", "pyformat"):
        return ["%s"] * count
    if paramstyle == "numeric":
        return [f":{index}" for index in range(1, count + 1)]
    raise StoreError(
        "find_by_native_sql",
        f"driver paramstyle '{paramstyle}' has no positional placeholders",
    )


class EmployeeRepository:
    """Repository for Employee entity data access.

    Every write commits its own transaction. Store failures are rolled
    back and re-raised as ``StoreError``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self._session.rollback()
            logger.error(
                "Employee store operation failed",
                operation=operation,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise StoreError(operation, type(e).__name__) from e

    @staticmethod
    def _to_entity(row: EmployeeTable | None) -> Employee | None:
        if row is None:
            return None
        return Employee.model_validate(row, from_attributes=True)

    def _persist(self, employee: Employee) -> EmployeeTable:
        row = EmployeeTable(**employee.model_dump())
        if employee.id is None:
            self._session.add(row)
            return row
        # merge updates the row with this id, or inserts it when absent
        return self._session.merge(row)

    def save(self, employee: Employee) -> Employee:
        """Insert an employee without id, or update/insert the row with its id."""
        with self._store_errors("save"):
            row = self._persist(employee)
            self._session.commit()
            self._session.refresh(row)
        return Employee.model_validate(row, from_attributes=True)

    def save_all(self, employees: Iterable[Employee]) -> list[Employee]:
        """Save several employees in one transaction."""
        with self._store_errors("save_all"):
            rows = [self._persist(employee) for employee in employees]
            self._session.commit()
            for row in rows:
                self._session.refresh(row)
        return [Employee.model_validate(row, from_attributes=True) for row in rows]

    def find_all(self) -> list[Employee]:
        with self._store_errors("find_all"):
            rows = self._session.exec(
                select(EmployeeTable).order_by(EmployeeTable.id)
            ).all()
        return [Employee.model_validate(row, from_attributes=True) for row in rows]

    def find_by_id(self, employee_id: int) -> Employee | None:
        if not _ID_MIN <= employee_id <= _ID_MAX:
            return None
        with self._store_errors("find_by_id"):
            row = self._session.get(EmployeeTable, employee_id)
        return self._to_entity(row)

    def find_by_email(self, email: str) -> Employee | None:
        with self._store_errors("find_by_email"):
            statement = (
                select(EmployeeTable)
                .where(EmployeeTable.email == email)
                .order_by(EmployeeTable.id)
            )
            row = self._session.exec(statement).first()
        return self._to_entity(row)

    def delete_by_id(self, employee_id: int) -> None:
        """Delete the employee with this id; unknown ids are ignored."""
        if not _ID_MIN <= employee_id <= _ID_MAX:
            return
        with self._store_errors("delete_by_id"):
            row = self._session.get(EmployeeTable, employee_id)
            if row is None:
                return
            self._session.delete(row)
            self._session.commit()

    def delete_all(self) -> None:
        with self._store_errors("delete_all"):
            self._session.exec(delete(EmployeeTable))
            self._session.commit()

    def count(self) -> int:
        with self._store_errors("count"):
            return self._session.exec(
                select(func.count()).select_from(EmployeeTable)
            ).one()

    # Name lookups. All four variants return the lowest-id match, or None.

    def find_by_query(self, first_name: str, last_name: str) -> Employee | None:
        """Find by first and last name using an ORM query with inline values."""
        with self._store_errors("find_by_query"):
            statement = (
                select(EmployeeTable)
                .where(
                    EmployeeTable.first_name == first_name,
                    EmployeeTable.last_name == last_name,
                )
                .order_by(EmployeeTable.id)
            )
            row = self._session.exec(statement).first()
        return self._to_entity(row)

    def find_by_query_named_params(
        self, first_name: str, last_name: str
    ) -> Employee | None:
        """Find by first and last name using an ORM query with named parameters."""
        with self._store_errors("find_by_query_named_params"):
            statement = (
                select(EmployeeTable)
                .where(EmployeeTable.first_name == bindparam("first_name"))
                .where(EmployeeTable.last_name == bindparam("last_name"))
                .order_by(EmployeeTable.id)
            )
            row = self._session.exec(
                statement,
                params={"first_name": first_name, "last_name": last_name},
            ).first()
        return self._to_entity(row)

    def find_by_native_sql(self, first_name: str, last_name: str) -> Employee | None:
        """Find by first and last name using raw SQL with positional parameters."""
        with self._store_errors("find_by_native_sql"):
            connection = self._session.connection()
            first, last = _positional_placeholders(connection.dialect.paramstyle, 2)
            sql = (
                f"SELECT {_COLUMNS} FROM {EmployeeTable.__tablename__} "
                f"WHERE first_name = {first} AND last_name = {last} ORDER BY id"
            )
            mapping = (
                connection.exec_driver_sql(sql, (first_name, last_name))
                .mappings()
                .first()
            )
        if mapping is None:
            return None
        return Employee.model_validate(dict(mapping))

    def find_by_native_sql_named_params(
        self, first_name: str, last_name: str
    ) -> Employee | None:
        """Find by first and last name using raw SQL with named parameters."""
        with self._store_errors("find_by_native_sql_named_params"):
            statement = text(
                f"SELECT {_COLUMNS} FROM {EmployeeTable.__tablename__} "
                "WHERE first_name = :first_name AND last_name = :last_name "
                "ORDER BY id"
            )
            mapping = (
                self._session.exec(
                    statement,
                    params={"first_name": first_name, "last_name": last_name},
                )
                .mappings()
                .first()
            )
        if mapping is None:
            return None
        return Employee.model_validate(dict(mapping))
