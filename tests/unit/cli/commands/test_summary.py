"""Unit tests for the summary command."""

import json

import pytest
from click.testing import CliRunner

from truckflow.cli import cli
from truckflow.cli.commands.summary import PERIOD_CHOICES, summary
from truckflow.config.logging_config import reset_logging


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    yield CliRunner()
    reset_logging()


@pytest.fixture
def backup_file(tmp_path, sample_loads, sample_expenses):
    """Write a backup file with loads, expenses and owner-operator settings."""
    path = tmp_path / "backup.json"
    document = {
        "version": "1.0",
        "exportDate": "2025-06-18T12:00:00.000Z",
        "loads": sample_loads,
        "expenses": sample_expenses,
        "settings": {"earning_profile": "owner_operator", "percentage_rate": 0},
    }
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


class TestSummaryCommand:
    """Test suite for summary command."""

    def test_command_exists(self, runner):
        """Test that the command can be invoked."""
        result = runner.invoke(summary, ["--help"])
        assert result.exit_code == 0
        assert "--period" in result.output

    def test_period_choices(self):
        """Test the available periods."""
        assert PERIOD_CHOICES == ["all", "today", "thisWeek", "thisMonth", "thisYear"]

    def test_metrics_table(self, runner, backup_file):
        """Test headline metrics are printed."""
        result = runner.invoke(summary, [str(backup_file)])

        assert result.exit_code == 0
        assert "Earning profile: owner_operator" in result.output
        assert "Period: all" in result.output
        assert "$6,000.00" in result.output
        assert "$1,685.50" in result.output
        assert "$4,314.50" in result.output
        assert "2,000" in result.output
        assert "9.1%" in result.output

    def test_broker_table(self, runner, backup_file):
        """Test brokers are listed highest revenue first."""
        result = runner.invoke(summary, [str(backup_file)])

        assert "Revenue by broker" in result.output
        output = result.output
        assert output.index("TQL") < output.index("Coyote") < output.index("Unknown")

    def test_month_table_with_cumulative(self, runner, backup_file):
        """Test months are listed oldest first with running totals."""
        result = runner.invoke(summary, [str(backup_file)])

        output = result.output
        assert "Revenue by month" in output
        positions = [output.index(m) for m in ("2024-12", "2025-05", "2025-06")]
        assert positions == sorted(positions)
        assert "$2,000.00" in output  # running total after May

    def test_expense_categories(self, runner, backup_file):
        """Test expense categories are listed."""
        result = runner.invoke(summary, [str(backup_file)])

        assert "Expenses by category" in result.output
        assert "insurance" in result.output

    def test_period_filter(self, runner, backup_file):
        """Test a period narrows the loads that are summarized."""
        result = runner.invoke(summary, [str(backup_file), "--period", "thisYear"])

        assert result.exit_code == 0
        assert "Period: thisYear" in result.output

    def test_invalid_period(self, runner, backup_file):
        """Test an unknown period is rejected by the option parser."""
        result = runner.invoke(summary, [str(backup_file), "--period", "lastDecade"])

        assert result.exit_code == 2
        assert "Invalid value" in result.output

    def test_settings_from_config(self, runner, tmp_path, mock_env):
        """Test the configured pay profile is used when the backup has none."""
        path = tmp_path / "backup.json"
        path.write_text(
            json.dumps({"loads": [{"loaded_miles": 1000, "gross_amount": 5000}]}),
            encoding="utf-8",
        )

        result = runner.invoke(summary, [str(path)])

        assert result.exit_code == 0
        assert "Earning profile: solo_per_mile" in result.output
        assert "$600.00" in result.output

    def test_via_group(self, runner, backup_file):
        """Test the command through the main CLI group."""
        result = runner.invoke(cli, ["summary", str(backup_file)])
        assert result.exit_code == 0

    def test_missing_file(self, runner, tmp_path):
        """Test a missing backup exits with the input file error code."""
        result = runner.invoke(summary, [str(tmp_path / "missing.json")])

        assert result.exit_code == 2
        assert "Backup file not found" in result.output

    def test_invalid_json(self, runner, tmp_path):
        """Test invalid JSON exits with the data validation error code."""
        path = tmp_path / "backup.json"
        path.write_text("not json", encoding="utf-8")

        result = runner.invoke(summary, [str(path)])

        assert result.exit_code == 3
        assert "not valid JSON" in result.output

    def test_array_root(self, runner, tmp_path):
        """Test a backup must be a JSON object."""
        path = tmp_path / "backup.json"
        path.write_text("[]", encoding="utf-8")

        result = runner.invoke(summary, [str(path)])

        assert result.exit_code == 3
        assert "must be a JSON object" in result.output

    def test_invalid_layout(self, runner, tmp_path):
        """Test a backup whose loads are not a list is rejected."""
        path = tmp_path / "backup.json"
        path.write_text('{"loads": "many"}', encoding="utf-8")

        result = runner.invoke(summary, [str(path)])

        assert result.exit_code == 3
        assert "invalid layout" in result.output
