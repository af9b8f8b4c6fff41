"""
Unit tests for the Click-based CLI.
"""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from cahlter import __version__
from cahlter.cli.commands import build, cli, init, serve, version
from cahlter.models import CONFIG_FILE


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def vault_dir(tmp_path, runner):
    """An initialized vault with two chapters."""
    path = tmp_path / "notes"
    result = runner.invoke(init, [str(path)])
    assert result.exit_code == 0
    (path / "src" / "chapter1.md").write_text("# One")
    (path / "src" / "chapter2.md").write_text("# Two")
    return path


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self, runner):
        """Test that --help works."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "static web site generator" in result.output

    def test_cli_no_command(self, runner):
        """Test that running CLI with no command shows help."""
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Commands:" in result.output

    def test_version_command(self, runner):
        """Test version command."""
        result = runner.invoke(version)
        assert result.exit_code == 0
        assert "cahlter" in result.output
        assert __version__ in result.output


class TestInitCommand:
    """Test the init command."""

    def test_init_creates_vault(self, runner, tmp_path):
        result = runner.invoke(cli, ["init", str(tmp_path / "notes")])

        assert result.exit_code == 0
        assert (tmp_path / "notes" / CONFIG_FILE).exists()
        assert (tmp_path / "notes" / "src").is_dir()

    def test_init_defaults_to_current_directory(self, runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(cli, ["init"])

        assert result.exit_code == 0
        assert (tmp_path / CONFIG_FILE).exists()

    def test_init_twice_fails(self, runner, vault_dir):
        result = runner.invoke(cli, ["init", str(vault_dir)])
        assert result.exit_code == 1


class TestBuildCommand:
    """Test the build command."""

    def test_build_writes_site(self, runner, vault_dir):
        result = runner.invoke(build, [str(vault_dir)])

        assert result.exit_code == 0
        assert (vault_dir / "build" / "chapter1.html").exists()
        assert (vault_dir / "build" / "chapter2.html").exists()

    def test_build_with_log_level(self, runner, vault_dir):
        result = runner.invoke(cli, ["build", str(vault_dir), "--log-level", "DEBUG"])
        assert result.exit_code == 0

    def test_build_without_config_fails(self, runner, tmp_path):
        result = runner.invoke(build, [str(tmp_path)])
        assert result.exit_code == 1

    def test_build_with_broken_content_fails(self, runner, vault_dir):
        (vault_dir / "src" / "empty").mkdir()

        result = runner.invoke(build, [str(vault_dir)])

        assert result.exit_code == 1
        assert not (vault_dir / "build" / "chapter1.html").exists()

    def test_build_summary_vault_through_parent_path(self, runner, tmp_path, monkeypatch):
        """Test building a vault with a summary file given as a path with ..."""
        site = tmp_path / "site"
        assert runner.invoke(init, [str(site)]).exit_code == 0
        (site / "src" / "summary.md").write_text("- [Ch1](./ch1.md)\n")
        (site / "src" / "ch1.md").write_text("# One")
        (tmp_path / "work").mkdir()
        monkeypatch.chdir(tmp_path / "work")

        result = runner.invoke(cli, ["build", "../site"])

        assert result.exit_code == 0, result.output
        assert (site / "build" / "ch1.html").exists()

    def test_invalid_log_level(self, runner, vault_dir):
        result = runner.invoke(build, [str(vault_dir), "--log-level", "LOUD"])
        assert result.exit_code == 2


class TestServeCommand:
    """Test the serve command without opening a socket."""

    @patch("cahlter.cli.commands.ThreadingHTTPServer")
    def test_serve_builds_and_serves(self, mock_server, runner, vault_dir):
        httpd = MagicMock()
        mock_server.return_value.__enter__.return_value = httpd
        httpd.serve_forever.side_effect = KeyboardInterrupt

        result = runner.invoke(serve, [str(vault_dir), "--port", "3000"])

        assert result.exit_code == 0
        assert (vault_dir / "build" / "chapter1.html").exists()
        (address, handler), _ = mock_server.call_args
        assert address == ("127.0.0.1", 3000)
        assert handler.keywords["directory"] == str(vault_dir / "build")
        assert "Server stopped" in result.output

    @patch("cahlter.cli.commands.ThreadingHTTPServer")
    def test_serve_default_port(self, mock_server, runner, vault_dir, monkeypatch):
        monkeypatch.delenv("CAHLTER_PORT", raising=False)
        mock_server.return_value.__enter__.return_value.serve_forever.side_effect = (
            KeyboardInterrupt
        )

        result = runner.invoke(serve, [str(vault_dir)])

        assert result.exit_code == 0
        (address, _), _ = mock_server.call_args
        assert address[1] == 8080

    @patch("cahlter.cli.commands.ThreadingHTTPServer")
    def test_serve_without_config_fails(self, mock_server, runner, tmp_path):
        result = runner.invoke(serve, [str(tmp_path), "--port", "3000"])

        assert result.exit_code == 1
        mock_server.assert_not_called()
