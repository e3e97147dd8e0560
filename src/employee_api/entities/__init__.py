"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model exchanged between layers
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .employee import Employee, EmployeeRepository, EmployeeTable

__all__ = [
    "Employee",
    "EmployeeTable",
    "EmployeeRepository",
]
