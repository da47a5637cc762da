"""
Record Parser

Converts raw CSV lines of the form ``<employee>,<manager-or-empty>,<salary>``
into validated Record objects. Parsing has no side effects: each function
either returns a value or raises the matching HierarchyError.
"""
import logging
import re
from typing import Iterator, List, Optional, Tuple

from core.constants import (
    EMPLOYEE_ID_PATTERN,
    EXPECTED_FIELD_COUNT,
    MIN_EMPLOYEE_ID,
    MIN_SALARY,
    SALARY_PATTERN,
)
from core.exceptions import (
    HierarchyError,
    InvalidEmployeeIdError,
    InvalidFormatError,
    InvalidSalaryError,
)
from core.models import Record
from utils.text_utils import is_blank, normalize_token, split_fields, split_lines

logger = logging.getLogger(__name__)

_EMPLOYEE_ID_RE = re.compile(EMPLOYEE_ID_PATTERN)
_SALARY_RE = re.compile(SALARY_PATTERN)


def parse_employee_id(token: Optional[str]) -> int:
    """
    Parse an employee token such as "Employee12" into its integer id.

    Matching is case-insensitive and ignores surrounding whitespace.

    Args:
        token: Raw employee token

    Returns:
        Positive integer id

    Raises:
        InvalidEmployeeIdError: Empty token, wrong prefix, or non-positive id
    """
    if token is None or is_blank(token):
        raise InvalidEmployeeIdError()

    match = _EMPLOYEE_ID_RE.match(normalize_token(token))
    if not match:
        raise InvalidEmployeeIdError()

    employee_id = int(match.group(1))
    if employee_id < MIN_EMPLOYEE_ID:
        raise InvalidEmployeeIdError()

    return employee_id


def parse_manager_id(token: Optional[str]) -> Optional[int]:
    """Parse a manager token; an empty token means the record has no manager."""
    if token is None or is_blank(token):
        return None
    return parse_employee_id(token)


def parse_salary(token: Optional[str]) -> int:
    """
    Parse a salary token as a base-10 integer of at least 1.

    Raises:
        InvalidSalaryError: Empty, non-numeric, fractional, or below 1
    """
    if token is None or is_blank(token):
        raise InvalidSalaryError()

    text = token.strip()
    if not _SALARY_RE.match(text):
        raise InvalidSalaryError()

    salary = int(text)
    if salary < MIN_SALARY:
        raise InvalidSalaryError()

    return salary


def parse_record(line: str) -> Record:
    """
    Parse one CSV line into a Record.

    Fields are checked left to right, so a bad employee id is reported
    before a bad manager id or salary on the same line.

    Args:
        line: A single line without its terminator

    Returns:
        Record with normalized integer fields and no reports

    Raises:
        InvalidFormatError: Line does not have exactly 3 fields
        InvalidEmployeeIdError: Bad employee or manager token
        InvalidSalaryError: Bad salary token
    """
    columns = split_fields(line)
    if len(columns) != EXPECTED_FIELD_COUNT:
        raise InvalidFormatError()

    employee_token, manager_token, salary_token = columns
    return Record(
        id=parse_employee_id(employee_token),
        manager_id=parse_manager_id(manager_token),
        salary=parse_salary(salary_token)
    )


def iter_records(text: str) -> Iterator[Tuple[int, Record]]:
    """
    Lazily parse every line of the input in order.

    Any error raised for a line carries that line's 1-based number.

    Yields:
        (line_number, record) pairs
    """
    for line_number, line in enumerate(split_lines(text), 1):
        try:
            record = parse_record(line)
        except HierarchyError as e:
            e.at_line(line_number)
            raise
        yield line_number, record


def parse_records(text: str) -> List[Record]:
    """Parse all lines into Records. Duplicate ids are not checked here."""
    records = [record for _, record in iter_records(text)]
    logger.debug("Parsed %d records", len(records))
    return records
