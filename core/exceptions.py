"""
Error taxonomy for hierarchy parsing and validation.

Every failure is raised as a subclass of HierarchyError so callers can catch
them uniformly, or by kind when they need to tell them apart.
"""
from enum import Enum
from typing import Optional

from core.constants import ERROR_MESSAGES


class ErrorKind(str, Enum):
    """Kinds of validation failure, mutually exclusive."""
    INVALID_FORMAT = 'InvalidFormat'
    INVALID_EMPLOYEE_ID = 'InvalidEmployeeId'
    INVALID_SALARY = 'InvalidSalary'
    DUPLICATE_EMPLOYEE = 'DuplicateEmployee'
    EMPLOYEE_NOT_FOUND = 'EmployeeNotFound'
    CEO_NOT_DEFINED = 'CeoNotDefined'
    MULTIPLE_CEOS_DEFINED = 'MultipleCeosDefined'
    CIRCULAR_REFERENCE = 'CircularReference'


class HierarchyError(Exception):
    """
    Base class for all hierarchy errors.

    Abstract: raise one of the subclasses, each of which sets ``kind``.
    """

    kind: Optional[ErrorKind] = None

    def __init__(self, detail: Optional[str] = None, line_number: Optional[int] = None):
        if self.kind is None:
            raise TypeError(f"{type(self).__name__} is abstract; raise a subclass with a kind")
        self.detail = detail
        self.message = ERROR_MESSAGES[self.kind.value]
        if detail:
            self.message = f"{self.message}: {detail}"
        self.line_number = line_number
        super().__init__(self.message)

    def at_line(self, line_number: int) -> 'HierarchyError':
        """Attach the 1-based input line the error was raised for."""
        self.line_number = line_number
        return self

    def __str__(self) -> str:
        if self.line_number is not None:
            return f"{self.message} (line {self.line_number})"
        return self.message


class InvalidFormatError(HierarchyError):
    kind = ErrorKind.INVALID_FORMAT


class InvalidEmployeeIdError(HierarchyError):
    kind = ErrorKind.INVALID_EMPLOYEE_ID


class InvalidSalaryError(HierarchyError):
    kind = ErrorKind.INVALID_SALARY


class DuplicateEmployeeError(HierarchyError):
    kind = ErrorKind.DUPLICATE_EMPLOYEE


class EmployeeNotFoundError(HierarchyError):
    kind = ErrorKind.EMPLOYEE_NOT_FOUND


class CeoNotDefinedError(HierarchyError):
    kind = ErrorKind.CEO_NOT_DEFINED


class MultipleCeosDefinedError(HierarchyError):
    kind = ErrorKind.MULTIPLE_CEOS_DEFINED


class CircularReferenceError(HierarchyError):
    kind = ErrorKind.CIRCULAR_REFERENCE
