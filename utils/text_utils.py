"""
Text utilities for employee CSV input.

Handles line splitting and token normalization.
"""
from typing import List

from core.constants import EMPLOYEE_DISPLAY_FORMAT, FIELD_SEPARATOR


def split_lines(text: str) -> List[str]:
    """
    Split raw input into lines, accepting \\n, \\r\\n and \\r endings.

    A single trailing line break does not produce an extra empty line.

    Args:
        text: Raw multi-line input

    Returns:
        List of lines without line terminators
    """
    if not text:
        return []
    return text.splitlines()


def split_fields(line: str) -> List[str]:
    """Split a CSV line on commas. No quoting or escaping is supported."""
    return line.split(FIELD_SEPARATOR)


def normalize_token(token: str) -> str:
    """Trim whitespace and lower-case a token."""
    return token.strip().lower()


def is_blank(token: str) -> bool:
    return not token or token.isspace()


def format_employee_id(employee_id: int) -> str:
    """
    Render an employee id the way it appears in input files.

    Args:
        employee_id: Parsed integer id

    Returns:
        Token such as "Employee12"
    """
    return EMPLOYEE_DISPLAY_FORMAT.format(id=employee_id)
