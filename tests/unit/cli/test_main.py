"""Unit tests for the main CLI application."""

import logging

from rich.logging import RichHandler
from typer.testing import CliRunner
from winstrap import __version__
from winstrap.cli.main import app, configure_logging

runner = CliRunner()


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"winstrap version {__version__}" in result.output

    def test_help_lists_commands(self) -> None:
        """--help lists every command."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("bootstrap", "provision", "check", "apps", "log"):
            assert command in result.output


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_levels(self) -> None:
        """Verbose shows DEBUG, quiet shows only errors."""
        logger = logging.getLogger("winstrap")

        configure_logging(verbose=True, quiet=False)
        assert logger.level == logging.DEBUG

        configure_logging(verbose=False, quiet=True)
        assert logger.level == logging.ERROR

        configure_logging(verbose=False, quiet=False)
        assert logger.level == logging.WARNING

    def test_single_handler(self) -> None:
        """Repeated configuration adds only one Rich handler."""
        configure_logging(verbose=False, quiet=False)
        configure_logging(verbose=False, quiet=False)

        handlers = logging.getLogger("winstrap").handlers
        assert sum(isinstance(h, RichHandler) for h in handlers) == 1
