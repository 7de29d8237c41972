"""Tests for CLI commands."""

from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner
from flatwiki.cli import cli
from flatwiki.config import Config


class TestServeCommand:
    """Tests for the serve command."""

    def test__serve__runs_server_with_overrides(self, tmp_path: Path) -> None:
        """Apply CLI overrides on top of the config file."""
        config_file = tmp_path / "flatwiki.toml"
        config_file.write_text('[server]\nport = 9000\n\n[wiki]\nfront_page = "Home"\n')
        data = tmp_path / "pages"
        data.mkdir()

        runner = CliRunner()
        with patch("flatwiki.server.run_server") as run_server:
            result = runner.invoke(
                cli,
                ["serve", "-c", str(config_file), "--data-dir", str(data), "--host", "0.0.0.0"],
            )

        assert result.exit_code == 0, result.output
        assert "Starting server on 0.0.0.0:9000" in result.output
        assert f"Data directory: {data}" in result.output
        assert "Templates: bundled" in result.output
        assert "Front page: Home" in result.output
        run_server.assert_called_once()
        config: Config = run_server.call_args.args[0]
        assert config.server.host == "0.0.0.0"
        assert config.server.port == 9000
        assert config.wiki.data_dir == data
        assert config.wiki.front_page == "Home"

    def test__templates_dir__reported(self, tmp_path: Path) -> None:
        config_file = tmp_path / "flatwiki.toml"
        config_file.write_text("")
        templates = tmp_path / "tpl"
        templates.mkdir()
        (tmp_path / "data").mkdir()

        runner = CliRunner()
        with patch("flatwiki.server.run_server"):
            result = runner.invoke(
                cli, ["serve", "-c", str(config_file), "--templates-dir", str(templates)]
            )

        assert result.exit_code == 0, result.output
        assert f"Templates directory: {templates}" in result.output

    def test__missing_data_dir__warns(self, tmp_path: Path) -> None:
        config_file = tmp_path / "flatwiki.toml"
        config_file.write_text("")

        runner = CliRunner()
        with patch("flatwiki.server.run_server") as run_server:
            result = runner.invoke(cli, ["serve", "-c", str(config_file)])

        assert result.exit_code == 0
        assert "does not exist, saves will fail" in result.output
        run_server.assert_called_once()

    def test__invalid_config__exits_with_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "flatwiki.toml"
        config_file.write_text('[server]\nport = "x"\n')

        runner = CliRunner()
        with patch("flatwiki.server.run_server") as run_server:
            result = runner.invoke(cli, ["serve", "-c", str(config_file)])

        assert result.exit_code == 1
        assert "server.port must be an integer" in result.output
        run_server.assert_not_called()

    def test__invalid_front_page__exits_with_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / "flatwiki.toml"
        config_file.write_text("")

        runner = CliRunner()
        with patch("flatwiki.server.run_server") as run_server:
            result = runner.invoke(
                cli, ["serve", "-c", str(config_file), "--front-page", "not valid"]
            )

        assert result.exit_code == 1
        assert "front page must contain only letters and digits" in result.output
        run_server.assert_not_called()
