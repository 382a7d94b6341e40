"""
Field-mapping mappers
=====================

Mappers demonstrating explicit renames (id <-> employeeId,
name <-> employeeName), nested mapping through another mapper, ignored
fields and date formatting. Every function is total and side-effect free.
"""

import logging
from datetime import datetime
from typing import Optional

from taskboard.models import (
    Division,
    Document,
    Employee,
    EmployeeWithDate,
    EmployeeWithDivision,
    SimpleSource,
)
from taskboard.schemas import (
    DivisionDTO,
    DocumentDTO,
    EmployeeDTO,
    EmployeeWithDateDTO,
    EmployeeWithDivisionDTO,
    SimpleDestination,
)

logger = logging.getLogger(__name__)

# dd-MM-yyyy HH:mm:ss
DATE_FORMAT = "%d-%m-%Y %H:%M:%S"


def format_date(value: Optional[datetime]) -> Optional[str]:
    return value.strftime(DATE_FORMAT) if value is not None else None


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """Parse DATE_FORMAT exactly; anything else maps to None"""
    if value is None:
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        logger.warning(f"Ignoring date {value!r}, expected format {DATE_FORMAT}")
        return None


class SimpleSourceDestinationMapper:

    def source_to_destination(self, source: SimpleSource) -> SimpleDestination:
        return SimpleDestination(name=source.name, description=source.description)

    def destination_to_source(self, destination: SimpleDestination) -> SimpleSource:
        return SimpleSource(name=destination.name, description=destination.description)


class DivisionMapper:

    def division_to_division_dto(self, entity: Optional[Division]) -> Optional[DivisionDTO]:
        if entity is None:
            return None
        return DivisionDTO(id=entity.id, name=entity.name)

    def division_dto_to_division(self, dto: Optional[DivisionDTO]) -> Optional[Division]:
        if dto is None:
            return None
        return Division(id=dto.id, name=dto.name)


class EmployeeMapper:

    def employee_to_employee_dto(self, entity: Employee) -> EmployeeDTO:
        return EmployeeDTO(employee_id=entity.id, employee_name=entity.name)

    def employee_dto_to_employee(self, dto: EmployeeDTO) -> Employee:
        return Employee(id=dto.employee_id, name=dto.employee_name)


class EmployeeWithDivisionMapper:
    """Employee renames plus the nested division mapped by DivisionMapper"""

    def __init__(self, division_mapper: Optional[DivisionMapper] = None):
        self.division_mapper = division_mapper or DivisionMapper()

    def employee_to_employee_dto(self, entity: EmployeeWithDivision) -> EmployeeWithDivisionDTO:
        return EmployeeWithDivisionDTO(
            employee_id=entity.id,
            employee_name=entity.name,
            division_dto=self.division_mapper.division_to_division_dto(entity.division),
        )

    def employee_dto_to_employee(self, dto: EmployeeWithDivisionDTO) -> EmployeeWithDivision:
        return EmployeeWithDivision(
            id=dto.employee_id,
            name=dto.employee_name,
            division=self.division_mapper.division_dto_to_division(dto.division_dto),
        )


class EmployeeWithDateMapper:
    """Employee renames plus the date rendered as "dd-MM-yyyy HH:mm:ss" on the DTO"""

    def employee_with_date_to_dto(self, entity: EmployeeWithDate) -> EmployeeWithDateDTO:
        return EmployeeWithDateDTO(
            employee_id=entity.id,
            employee_name=entity.name,
            date=format_date(entity.date),
        )

    def dto_to_employee_with_date(self, dto: EmployeeWithDateDTO) -> EmployeeWithDate:
        return EmployeeWithDate(
            id=dto.employee_id,
            name=dto.employee_name,
            date=parse_date(dto.date),
        )


class DocumentMapper:
    """comments and author are not filled toward the DTO, modificationTime not toward the entity"""

    def document_to_document_dto(self, entity: Document) -> DocumentDTO:
        return DocumentDTO(id=entity.id, title=entity.title, text=entity.text)

    def document_dto_to_document(self, dto: DocumentDTO) -> Document:
        return Document(id=dto.id, title=dto.title, text=dto.text)
