"""Utilities package - Helper functions for text processing."""

from .text_utils import (
    split_lines,
    split_fields,
    normalize_token,
    is_blank,
    format_employee_id
)

__all__ = [
    'split_lines',
    'split_fields',
    'normalize_token',
    'is_blank',
    'format_employee_id'
]
