from dataclasses import dataclass

from src.employee_api.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
