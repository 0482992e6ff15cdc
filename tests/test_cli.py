"""Tests for CLI commands."""

import json
from decimal import Decimal

from typer.testing import CliRunner

from taxbridge.cli import app

runner = CliRunner()


class TestCLI:
    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "TaxBridge" in result.output

    def test_no_command_shows_help(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "pit" in result.output

    def test_pit_help(self):
        result = runner.invoke(app, ["pit", "--help"])
        assert result.exit_code == 0

    def test_vat_help(self):
        result = runner.invoke(app, ["vat", "--help"])
        assert result.exit_code == 0

    def test_cit_help(self):
        result = runner.invoke(app, ["cit", "--help"])
        assert result.exit_code == 0


class TestPITCommand:
    def test_text_summary(self):
        result = runner.invoke(app, ["pit", "--gross", "5000000", "--rent", "1000000"])
        assert result.exit_code == 0
        assert "₦631,500.00" in result.output

    def test_json_output(self):
        result = runner.invoke(app, ["pit", "--gross", "5000000", "--rent", "1000000", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert Decimal(data["chargeable_income"]) == Decimal("4675000")
        assert data["is_exempt"] is False
        assert len(data["band_breakdown"]) == 3

    def test_declared_nhf(self):
        result = runner.invoke(app, ["pit", "--gross", "1000000", "--nhf", "0", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert Decimal(data["estimated_tax"]) == Decimal("30000")

    def test_missing_gross_income(self):
        result = runner.invoke(app, ["pit"])
        assert result.exit_code == 1
        assert "Annual gross income is required" in result.output

    def test_validation_errors_listed(self):
        result = runner.invoke(app, ["pit", "--gross", "150000000", "--rent=-5"])
        assert result.exit_code == 1
        assert "realistic income" in result.output
        assert "Annual rent cannot be negative" in result.output

    def test_writes_report_file(self, tmp_path):
        out = tmp_path / "reports" / "pit.txt"
        result = runner.invoke(app, ["pit", "--gross", "500000", "--output", str(out)])
        assert result.exit_code == 0
        assert out.exists()
        assert "Exempt" in out.read_text(encoding="utf-8")


class TestThresholdCommands:
    def test_vat_approaching(self):
        result = runner.invoke(app, ["vat", "80000000"])
        assert result.exit_code == 0
        assert "approaching" in result.output
        assert "Approaching threshold (₦20,000,000 remaining)" in result.output

    def test_vat_json_turnover_has_no_float_suffix(self):
        result = runner.invoke(app, ["vat", "80000000", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["turnover"] == "80000000"
        assert data["message"] == "Approaching threshold (₦20,000,000 remaining)"

    def test_cit_json_turnover_has_no_float_suffix(self):
        result = runner.invoke(app, ["cit", "60000000", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["turnover"] == "60000000"
        assert data["category"] == "medium"

    def test_vat_json(self):
        result = runner.invoke(app, ["vat", "100000000", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["status"] == "mandatory"
        assert data["requires_registration"] is True

    def test_cit_large(self):
        result = runner.invoke(app, ["cit", "100000001"])
        assert result.exit_code == 0
        assert "large" in result.output
        assert "30%" in result.output

    def test_bands_table(self):
        result = runner.invoke(app, ["bands"])
        assert result.exit_code == 0
        assert "25%" in result.output
