"""
Tests for the command-line wrapper.
"""
import json

import pytest
from cli_workflow import main


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_file(self, budget_csv, write_csv, capsys):
        exit_code = main(['validate', write_csv(budget_csv)])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "10 employees" in output
        assert "CEO: Employee1" in output
        assert "Total salary: 2820" in output

    def test_invalid_file(self, write_csv, capsys):
        exit_code = main(['validate', write_csv("Employee1,,250\nEmployee2,,100")])

        output = capsys.readouterr().out
        assert exit_code == 1
        assert "MultipleCeosDefined" in output

    def test_unreadable_file(self, temp_dir, capsys):
        exit_code = main(['validate', str(temp_dir / "missing.csv")])

        assert exit_code == 1
        assert "Error In Reading File" in capsys.readouterr().out

    def test_missing_argument(self):
        with pytest.raises(SystemExit):
            main(['validate'])

    def test_no_command(self, capsys):
        assert main([]) == 1


class TestQueryCommands:
    """Tests for reports, budget and show-tree commands."""

    def test_reports(self, direct_reports_csv, write_csv, capsys):
        exit_code = main(['reports', write_csv(direct_reports_csv), 'Employee1'])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "3 direct reports" in output
        for employee in ("Employee2", "Employee5", "Employee7"):
            assert employee in output

    def test_reports_none(self, direct_reports_csv, write_csv, capsys):
        exit_code = main(['reports', write_csv(direct_reports_csv), 'Employee99'])

        assert exit_code == 0
        assert "No direct reports" in capsys.readouterr().out

    def test_reports_invalid_token(self, direct_reports_csv, write_csv, capsys):
        exit_code = main(['reports', write_csv(direct_reports_csv), 'Boss'])

        assert exit_code == 1
        assert "InvalidEmployeeId" in capsys.readouterr().out

    def test_budget(self, budget_csv, write_csv, capsys):
        exit_code = main(['budget', write_csv(budget_csv), 'Employee2'])

        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "1410"

    def test_budget_unknown_employee(self, budget_csv, write_csv, capsys):
        exit_code = main(['budget', write_csv(budget_csv), 'Employee404'])

        assert exit_code == 1
        assert "EmployeeNotFound" in capsys.readouterr().out

    def test_show_tree(self, budget_csv, write_csv, capsys):
        exit_code = main(['show-tree', write_csv(budget_csv)])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "├─ Employee1 (400)" in output
        assert "Employee10 (150)" in output

    def test_show_tree_json(self, budget_csv, write_csv, capsys):
        exit_code = main(['show-tree', write_csv(budget_csv), '--json'])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert data['total_salary'] == 2820
        assert data['root_id'] == 1
        assert data['employees'][0]['employee'] == "Employee1"


class TestDeepHierarchy:
    """Tests for show-tree on hierarchies deeper than the recursion limit."""

    DEPTH = 2000

    @pytest.fixture
    def deep_file(self, write_csv):
        lines = ["Employee1,,1"]
        lines += [f"Employee{i},Employee{i - 1},1" for i in range(2, self.DEPTH + 1)]
        return write_csv("\n".join(lines), name="deep.csv")

    def test_show_tree(self, deep_file, capsys):
        exit_code = main(['show-tree', deep_file])

        output = capsys.readouterr().out
        assert exit_code == 0
        assert f"├─ Employee{self.DEPTH} (1)" in output

    def test_show_tree_json(self, deep_file, capsys):
        exit_code = main(['show-tree', deep_file, '--json'])

        data = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert len(data['employees']) == self.DEPTH
        assert data['employees'][-1]['depth'] == self.DEPTH - 1
