"""
Tests for the CLI functionality
"""

import logging
from unittest.mock import patch

from typer.testing import CliRunner

from rentalstatement.cli import app
from rentalstatement.exceptions import MovieNotFoundError
from rentalstatement.sample import sample_catalog, sample_customer
from rentalstatement.statement import render_statement


class TestCLI:
    """Test cases for CLI functionality"""

    def setup_method(self):
        """Set up test fixtures"""
        self.runner = CliRunner()
        self.package_logger = logging.getLogger("rentalstatement")
        self.original_level = self.package_logger.level

    def teardown_method(self):
        """Clean up test fixtures"""
        self.package_logger.setLevel(self.original_level)

    def test_version_option(self):
        """Test --version option"""
        result = self.runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "rentalstatement version" in result.stdout

    def test_help_option(self):
        """Test --help option"""
        result = self.runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--table" in result.stdout

    def test_sample_statement(self):
        """Without options the plain text statement is printed"""
        result = self.runner.invoke(app, [])

        assert result.exit_code == 0
        assert "Rental Record for martin" in result.stdout
        assert "-" * 38 in result.stdout
        assert "Amount owed is".ljust(30) + "    8.50" in result.stdout
        assert "Earned 4 frequent renter points" in result.stdout

    def test_output_matches_rendered_statement(self):
        """Printed text is exactly the rendered statement, even for long lines"""
        name = "Ana " * 30
        result = self.runner.invoke(app, ["--name", name])

        assert result.exit_code == 0
        assert result.stdout == render_statement(sample_customer(name), sample_catalog())

    def test_name_option(self):
        """Test --name option"""
        result = self.runner.invoke(app, ["--name", "ingmar"])
        assert result.exit_code == 0
        assert "Rental Record for ingmar" in result.stdout

    def test_table_option(self):
        """Test --table option"""
        result = self.runner.invoke(app, ["--table"])

        assert result.exit_code == 0
        assert "Rental Record for martin" in result.stdout
        assert "8.50" in result.stdout
        assert "-" * 38 not in result.stdout

    def test_verbose_option(self):
        """Test --verbose option"""
        result = self.runner.invoke(app, ["--verbose"])
        assert result.exit_code == 0
        assert self.package_logger.level == logging.DEBUG

    def test_default_log_level(self):
        """Without --verbose debug logging stays off"""
        self.package_logger.setLevel(logging.NOTSET)
        result = self.runner.invoke(app, [])
        assert result.exit_code == 0
        assert self.package_logger.level != logging.DEBUG

    def test_statement_error_exits_with_code_1(self):
        """Statement errors are reported and exit non-zero"""
        with patch('rentalstatement.cli.StatementRenderer') as mock_renderer:
            mock_renderer.return_value.render.side_effect = MovieNotFoundError("F999")

            result = self.runner.invoke(app, [])

        assert result.exit_code == 1
        assert "Rental Record" not in result.stdout
