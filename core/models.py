"""
Core domain models for the employee hierarchy.

These are pure data structures without validation logic.
"""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Record:
    """
    One validated employee row.

    Identity is the employee id: two records with the same id compare equal
    regardless of manager or salary. ``reports`` is filled once during tree
    assembly and is empty for leaves.
    """
    id: int
    manager_id: Optional[int] = field(compare=False)
    salary: int = field(compare=False)
    reports: List['Record'] = field(default_factory=list, compare=False, repr=False)

    @property
    def is_root(self) -> bool:
        """True for the CEO, the only record without a manager."""
        return self.manager_id is None

    def to_dict(self) -> dict:
        """Convert to dictionary; reports are listed by id."""
        return {
            'id': self.id,
            'manager_id': self.manager_id,
            'salary': self.salary,
            'reports': [report.id for report in self.reports]
        }
