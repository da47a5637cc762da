"""
Hierarchy Building Component.

Turns raw employee CSV text into a validated reporting tree rooted at a
single CEO, and answers read-only queries against it.

Validation runs in a fixed order and the first failure aborts the whole
construction:

1. parse each line, rejecting duplicate ids as they appear
2. every manager id must be a known employee
3. no manager and direct report may name each other as manager
4. exactly one record without a manager (the CEO)
5. assemble the tree from the CEO down
"""
import logging
from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from config.settings import settings
from core.exceptions import (
    CeoNotDefinedError,
    CircularReferenceError,
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    MultipleCeosDefinedError,
)
from core.models import Record
from core.schemas import EmployeeNodeResponse, HierarchyResponse
from parsing.record_parser import iter_records, parse_employee_id
from utils.text_utils import format_employee_id

logger = logging.getLogger(__name__)


class HierarchyBuilder:
    """
    Builds and queries an employee hierarchy.

    Construction is atomic: the constructor either returns a fully built,
    read-only hierarchy or raises a HierarchyError.
    """

    def __init__(self, text: str):
        """
        Parse, validate and assemble the hierarchy.

        Args:
            text: Employee CSV, one ``employee,manager,salary`` row per line

        Raises:
            HierarchyError: The first validation failure encountered
        """
        # Insertion-ordered, so lookups by manager keep parse order
        self._records: Dict[int, Record] = {}
        self._reports_by_manager: Dict[Optional[int], List[Record]] = defaultdict(list)

        self._parse_employee_csv(text)
        self._validate_managers_are_employees()
        self._validate_circular_references()
        self._root = self._get_root_node()
        self._build_employee_tree(self._root)

        logger.debug(
            "Built hierarchy with %d employees under %s",
            len(self._records), format_employee_id(self._root.id)
        )

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        encoding: Optional[str] = None
    ) -> 'HierarchyBuilder':
        """
        Read an employee CSV file and build its hierarchy.

        Args:
            path: Path to the CSV file
            encoding: File encoding, defaults to settings.input_encoding

        Raises:
            OSError: The file could not be read
            HierarchyError: The file contents are invalid
        """
        text = Path(path).read_text(encoding=encoding or settings.input_encoding)
        return cls(text)

    def _parse_employee_csv(self, text: str) -> None:
        for line_number, record in iter_records(text):
            if record.id in self._records:
                raise DuplicateEmployeeError(line_number=line_number)

            self._records[record.id] = record
            self._reports_by_manager[record.manager_id].append(record)

        logger.debug("Parsed %d employee records", len(self._records))

    def _validate_manager_is_employee(self, manager_id: Optional[int]) -> None:
        if manager_id is None:
            return
        if manager_id not in self._records:
            raise EmployeeNotFoundError(format_employee_id(manager_id))

    def _validate_managers_are_employees(self) -> None:
        for record in self._records.values():
            self._validate_manager_is_employee(record.manager_id)

    def _validate_circular_references(self) -> None:
        """
        Reject a manager and direct report that name each other as manager.

        Only two-node cycles are detected here. A longer cycle without a CEO
        surfaces later as CeoNotDefined.
        """
        for record in self._records.values():
            if record.manager_id is None:
                continue
            for report in self._reports_by_manager.get(record.id, []):
                if report.id == record.manager_id:
                    raise CircularReferenceError(
                        f"{format_employee_id(record.id)} and {format_employee_id(report.id)}"
                    )

    def _get_root_node(self) -> Record:
        ceos = self._reports_by_manager.get(None, [])

        if len(ceos) < 1:
            raise CeoNotDefinedError()
        if len(ceos) > 1:
            raise MultipleCeosDefinedError()
        return ceos[0]

    def _build_employee_tree(self, root: Record) -> None:
        """Attach direct reports to every node reachable from the root."""
        stack = [root]
        reachable = 0

        while stack:
            node = stack.pop()
            self._validate_manager_is_employee(node.manager_id)

            node.reports.extend(self._reports_by_manager.get(node.id, []))
            reachable += 1
            stack.extend(node.reports)

        unreachable = len(self._records) - reachable
        if unreachable:
            # Cycles longer than two nodes hang off no manager chain to the CEO
            logger.warning(
                "%d employee(s) are not reachable from %s",
                unreachable, format_employee_id(root.id)
            )

    @property
    def root(self) -> Record:
        """The CEO."""
        return self._root

    @property
    def records(self) -> List[Record]:
        """All records in parse order."""
        return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._records

    def get_employee(self, employee_id: int) -> Record:
        """
        Look up a record by id.

        Raises:
            EmployeeNotFoundError: No record has this id
        """
        try:
            return self._records[employee_id]
        except KeyError:
            raise EmployeeNotFoundError(format_employee_id(employee_id)) from None

    def get_direct_reports(self, manager_id: int) -> List[Record]:
        """
        Records whose manager is ``manager_id``, in parse order.

        Unknown ids yield an empty list rather than an error.
        """
        if manager_id is None:
            return []
        return list(self._reports_by_manager.get(manager_id, []))

    def walk(self, record: Record) -> Iterator[Tuple[Record, int]]:
        """
        Yield ``(node, depth)`` for ``record`` and all its transitive reports.

        Traversal is depth-first pre-order, with ``record`` at depth 0.
        """
        stack = [(record, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            stack.extend((report, depth + 1) for report in reversed(node.reports))

    def iter_subtree(self, record: Record) -> Iterator[Record]:
        """Yield ``record`` and all its transitive reports, depth-first pre-order."""
        for node, _ in self.walk(record):
            yield node

    def get_salary_budget(self, employee: str) -> int:
        """
        Total salary of an employee and everyone reporting to them.

        Args:
            employee: Employee token such as "Employee2"

        Returns:
            Sum of the subtree's salaries

        Raises:
            InvalidEmployeeIdError: Token is not a valid employee id
            EmployeeNotFoundError: No such employee
        """
        record = self.get_employee(parse_employee_id(employee))
        return sum(node.salary for node in self.iter_subtree(record))

    def to_dict(self) -> dict:
        """
        Convert the tree to a flat dictionary.

        Employees are listed in pre-order from the CEO and refer to their
        reports by id.
        """
        return {
            'root_id': self._root.id,
            'employees': [node.to_dict() for node in self.iter_subtree(self._root)]
        }

    def to_schema(self) -> HierarchyResponse:
        """Convert the tree to a pydantic response model."""
        nodes = list(self.walk(self._root))
        budgets: Dict[int, int] = {}

        # Children precede parents in reversed pre-order
        for node, _ in reversed(nodes):
            budgets[node.id] = node.salary + sum(budgets[r.id] for r in node.reports)

        employees = [
            EmployeeNodeResponse(
                id=node.id,
                employee=format_employee_id(node.id),
                manager_id=node.manager_id,
                depth=depth,
                salary=node.salary,
                salary_budget=budgets[node.id],
                reports=[r.id for r in node.reports]
            )
            for node, depth in nodes
        ]

        return HierarchyResponse(
            total_employees=len(self._records),
            reachable_employees=len(nodes),
            total_salary=sum(r.salary for r in self._records.values()),
            root_id=self._root.id,
            employees=employees
        )


def build_hierarchy(text: str) -> HierarchyBuilder:
    """Build a hierarchy from raw CSV text."""
    return HierarchyBuilder(text)


__all__ = ['HierarchyBuilder', 'build_hierarchy']
