#!/usr/bin/env python3
"""
CLI workflow runner for the employee hierarchy validator.

Reads an employee CSV file, builds the validated hierarchy and reports on it.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import settings
from core.exceptions import HierarchyError
from hierarchy.builder import HierarchyBuilder
from parsing.record_parser import parse_employee_id
from utils.text_utils import format_employee_id


logger = logging.getLogger(__name__)


def load_hierarchy_cli(file_path: str) -> Optional[HierarchyBuilder]:
    """Read and validate an employee CSV file, printing any failure."""
    logger.info("Loading employees from %s", file_path)
    try:
        text = Path(file_path).read_text(encoding=settings.input_encoding)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error In Reading File : {e}")
        return None

    try:
        return HierarchyBuilder(text)
    except HierarchyError as e:
        print(f"❌ {e.kind.value}: {e}")
        return None


def validate_cli(file_path: str) -> int:
    """Validate a file and print a short summary."""
    helper = load_hierarchy_cli(file_path)
    if helper is None:
        return 1

    root = helper.root
    print(f"✓ Valid hierarchy: {len(helper)} employees")
    print(f"  CEO: {format_employee_id(root.id)}")
    print(f"  Total salary: {helper.get_salary_budget(format_employee_id(root.id))}")
    return 0


def reports_cli(file_path: str, employee: str) -> int:
    """List the direct reports of an employee."""
    helper = load_hierarchy_cli(file_path)
    if helper is None:
        return 1

    try:
        employee_id = parse_employee_id(employee)
    except HierarchyError as e:
        print(f"❌ {e.kind.value}: {e}")
        return 1

    reports = helper.get_direct_reports(employee_id)
    if not reports:
        print(f"No direct reports for {format_employee_id(employee_id)}.")
        return 0

    print(f"\n{format_employee_id(employee_id)} has {len(reports)} direct reports:")
    print("-" * 40)
    print(f"{'Employee':<20} {'Salary':>10}")
    print("-" * 40)
    for record in reports:
        print(f"{format_employee_id(record.id):<20} {record.salary:>10}")
    return 0


def budget_cli(file_path: str, employee: str) -> int:
    """Print the salary budget of an employee's subtree."""
    helper = load_hierarchy_cli(file_path)
    if helper is None:
        return 1

    try:
        budget = helper.get_salary_budget(employee)
    except HierarchyError as e:
        print(f"❌ {e.kind.value}: {e}")
        return 1

    print(budget)
    return 0


def show_tree_cli(file_path: str, as_json: bool = False) -> int:
    """Show the tree structure for a file."""
    helper = load_hierarchy_cli(file_path)
    if helper is None:
        return 1

    if as_json:
        print(json.dumps(helper.to_schema().model_dump(), indent=2))
        return 0

    indent = " " * settings.tree_indent

    print("\nTree Structure:")
    print("-" * 60)
    for node, depth in helper.walk(helper.root):
        print(indent * depth + f"├─ {format_employee_id(node.id)} ({node.salary})")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Employee hierarchy validation CLI'
    )
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Validate command
    validate_parser = subparsers.add_parser('validate', help='Validate an employee CSV file')
    validate_parser.add_argument('file', type=str, help='Employee CSV file')

    # Reports command
    reports_parser = subparsers.add_parser('reports', help='List direct reports of an employee')
    reports_parser.add_argument('file', type=str, help='Employee CSV file')
    reports_parser.add_argument('employee', type=str, help='Employee token, e.g. Employee1')

    # Budget command
    budget_parser = subparsers.add_parser('budget', help='Salary budget of an employee and their reports')
    budget_parser.add_argument('file', type=str, help='Employee CSV file')
    budget_parser.add_argument('employee', type=str, help='Employee token, e.g. Employee1')

    # Show tree command
    tree_parser = subparsers.add_parser('show-tree', help='Show tree structure')
    tree_parser.add_argument('file', type=str, help='Employee CSV file')
    tree_parser.add_argument('--json', action='store_true', help='Print the tree as JSON')

    args = parser.parse_args(argv)

    logging.basicConfig(**settings.get_logging_config())

    if args.command == 'validate':
        return validate_cli(args.file)
    elif args.command == 'reports':
        return reports_cli(args.file, args.employee)
    elif args.command == 'budget':
        return budget_cli(args.file, args.employee)
    elif args.command == 'show-tree':
        return show_tree_cli(args.file, as_json=args.json)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
