"""Employee, division and document entities used by the field-mapping mappers"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Division:
    id: int = 0
    name: Optional[str] = None


@dataclass
class Employee:
    id: int = 0
    name: Optional[str] = None


@dataclass
class EmployeeWithDivision:
    id: int = 0
    name: Optional[str] = None
    division: Optional[Division] = None


@dataclass
class EmployeeWithDate:
    id: int = 0
    name: Optional[str] = None
    date: Optional[datetime] = None


@dataclass
class Document:
    id: int = 0
    title: Optional[str] = None
    text: Optional[str] = None
    modification_time: Optional[datetime] = None


@dataclass
class SimpleSource:
    name: Optional[str] = None
    description: Optional[str] = None
