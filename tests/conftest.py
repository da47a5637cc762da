"""
Pytest configuration and global fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))


def join_lines(lines, newline="\n"):
    """Join CSV rows the way an input file would."""
    return newline.join(lines)


@pytest.fixture
def budget_lines():
    """Three-level organization with known subtree budgets."""
    return [
        "Employee1,,400",
        "Employee2,Employee1,350",
        "Employee3,Employee1,340",
        "Employee4,Employee1,320",
        "Employee5,Employee2,300",
        "Employee6,Employee2,280",
        "Employee7,Employee2,250",
        "Employee8,Employee2,230",
        "Employee9,Employee3,200",
        "Employee10,Employee3,150",
    ]


@pytest.fixture
def budget_csv(budget_lines):
    return join_lines(budget_lines)


@pytest.fixture
def direct_reports_csv():
    """Organization where Employee1 and Employee2 have interleaved reports."""
    return join_lines([
        "Employee1,,250",
        "Employee2,Employee1,100",
        "Employee4,Employee2,130",
        "Employee5,Employee1,130",
        "Employee6,Employee2,130",
        "Employee7,Employee1,130",
    ])


@pytest.fixture
def temp_dir(tmp_path):
    """Provide temporary directory for test files."""
    return tmp_path


@pytest.fixture
def write_csv(temp_dir):
    """Write CSV text to a file and return its path."""
    def _write(text, name="employees.csv", encoding="utf-8"):
        path = temp_dir / name
        path.write_text(text, encoding=encoding)
        return str(path)

    return _write
