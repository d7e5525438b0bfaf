"""Tests for main CLI module."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from managed_certs.cli.main import app
from managed_certs.integrations.kubernetes.config import DEFAULT_COMPONENT
from managed_certs.utils.random import NameGenerationError


class TestCLIMain:
    """Test main CLI entry point."""

    @pytest.mark.unit
    def test_help_option(self, cli_runner: CliRunner) -> None:
        """Test --help option displays help text."""
        result = cli_runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Managed certificates CLI" in result.stdout

    @pytest.mark.unit
    def test_version_option(self, cli_runner: CliRunner) -> None:
        """Test --version option displays version."""
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "mcrt version 0.1.0" in result.stdout

    @pytest.mark.unit
    def test_verbose_flag(
        self,
        cli_runner: CliRunner,
        mock_resolve_config: MagicMock,
        _no_logging_setup: MagicMock,
    ) -> None:
        """Test --verbose enables INFO console logging."""
        result = cli_runner.invoke(app, ["--verbose", "random-name"])

        assert result.exit_code == 0
        _no_logging_setup.assert_called_once_with(verbose=True, debug=False, json_output=False)

    @pytest.mark.unit
    def test_log_level_from_config(
        self,
        cli_runner: CliRunner,
        temp_dir: Path,
        _no_logging_setup: MagicMock,
    ) -> None:
        """Test log_level and json_logs from the config file drive logging."""
        config_file = temp_dir / "config.yaml"
        config_file.write_text("log_level: debug\njson_logs: true\n")

        result = cli_runner.invoke(app, ["--config", str(config_file), "random-name"])

        assert result.exit_code == 0
        _no_logging_setup.assert_called_once_with(
            verbose=False,
            debug=True,
            json_output=True,
            component=DEFAULT_COMPONENT,
        )

    @pytest.mark.unit
    def test_invalid_config_file(self, cli_runner: CliRunner, temp_dir: Path) -> None:
        """Test an invalid config file is reported and exits 1."""
        config_file = temp_dir / "config.yaml"
        config_file.write_text("environment: local\n")

        result = cli_runner.invoke(app, ["-c", str(config_file), "random-name"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.stdout


class TestRandomNameCommand:
    """Test random-name command."""

    @pytest.mark.unit
    def test_prints_name(self, cli_runner: CliRunner, mock_resolve_config: MagicMock) -> None:
        result = cli_runner.invoke(app, ["random-name"])

        assert result.exit_code == 0
        name = result.stdout.strip()
        assert name.startswith("mcrt-")
        assert 0 < len(name) < 64

    @pytest.mark.unit
    def test_generation_failure(
        self, cli_runner: CliRunner, mock_resolve_config: MagicMock
    ) -> None:
        with patch(
            "managed_certs.cli.main.random_name",
            side_effect=NameGenerationError("entropy source unavailable"),
        ):
            result = cli_runner.invoke(app, ["random-name"])

        assert result.exit_code == 1
        assert "entropy source unavailable" in result.stdout
