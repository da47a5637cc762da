"""Parsing package - CSV line to Record conversion."""

from .record_parser import (
    parse_employee_id,
    parse_manager_id,
    parse_salary,
    parse_record,
    iter_records,
    parse_records
)

__all__ = [
    'parse_employee_id',
    'parse_manager_id',
    'parse_salary',
    'parse_record',
    'iter_records',
    'parse_records'
]
