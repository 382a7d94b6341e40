"""Employee, division and document schemas used by the field-mapping mappers"""

from typing import List, Optional

from taskboard.schemas.base import CamelModel


class DivisionDTO(CamelModel):
    id: int = 0
    name: Optional[str] = None


class EmployeeDTO(CamelModel):
    employee_id: int = 0
    employee_name: Optional[str] = None


class EmployeeWithDivisionDTO(CamelModel):
    employee_id: int = 0
    employee_name: Optional[str] = None
    division_dto: Optional[DivisionDTO] = None


class EmployeeWithDateDTO(CamelModel):
    """Employee whose date travels as a "dd-MM-yyyy HH:mm:ss" string"""
    employee_id: int = 0
    employee_name: Optional[str] = None
    date: Optional[str] = None


class DocumentDTO(CamelModel):
    id: int = 0
    title: Optional[str] = None
    text: Optional[str] = None
    comments: Optional[List[str]] = None
    author: Optional[str] = None


class SimpleDestination(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
