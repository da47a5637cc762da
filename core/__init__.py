"""Core package - Domain models, constants and errors."""

from .models import Record
from .constants import (
    EXPECTED_FIELD_COUNT,
    EMPLOYEE_ID_PATTERN,
    SALARY_PATTERN,
    ERROR_MESSAGES,
)
from .exceptions import (
    ErrorKind,
    HierarchyError,
    InvalidFormatError,
    InvalidEmployeeIdError,
    InvalidSalaryError,
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    CeoNotDefinedError,
    MultipleCeosDefinedError,
    CircularReferenceError,
)

__all__ = [
    'Record',
    'EXPECTED_FIELD_COUNT',
    'EMPLOYEE_ID_PATTERN',
    'SALARY_PATTERN',
    'ERROR_MESSAGES',
    'ErrorKind',
    'HierarchyError',
    'InvalidFormatError',
    'InvalidEmployeeIdError',
    'InvalidSalaryError',
    'DuplicateEmployeeError',
    'EmployeeNotFoundError',
    'CeoNotDefinedError',
    'MultipleCeosDefinedError',
    'CircularReferenceError',
]
