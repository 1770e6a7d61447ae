"""Unit tests for the init command and global options."""

import tomllib
from pathlib import Path

from assetsweep import __version__
from assetsweep.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestInitCommand:
    """Tests for assetsweep init."""

    def test_init_creates_config(self, tmp_path: Path) -> None:
        """Init writes the default configuration."""
        result = runner.invoke(app, ["-p", str(tmp_path), "init"])

        assert result.exit_code == 0
        assert "Configuration created" in result.stdout
        data = tomllib.loads((tmp_path / "assetsweep.toml").read_text(encoding="utf-8"))
        assert data["assets"]["manifest_path"] == "unused-assets.json"
        assert data["components"]["manifest_path"] == "unused-components.json"

    def test_init_refuses_to_overwrite(self, tmp_path: Path) -> None:
        """An existing file is kept unless --force is given."""
        config_path = tmp_path / "assetsweep.toml"
        config_path.write_text("[assets]\n", encoding="utf-8")

        result = runner.invoke(app, ["-p", str(tmp_path), "init"])

        assert result.exit_code == 1
        assert config_path.read_text(encoding="utf-8") == "[assets]\n"

    def test_init_force(self, tmp_path: Path) -> None:
        """--force overwrites an existing file."""
        config_path = tmp_path / "assetsweep.toml"
        config_path.write_text("[assets]\n", encoding="utf-8")

        result = runner.invoke(app, ["-p", str(tmp_path), "init", "--force"])

        assert result.exit_code == 0
        assert "scan_paths" in config_path.read_text(encoding="utf-8")

    def test_init_custom_config_path(self, tmp_path: Path) -> None:
        """--config selects another file."""
        config_path = tmp_path / "conf" / "sweep.toml"

        result = runner.invoke(app, ["-p", str(tmp_path), "-c", str(config_path), "init"])

        assert result.exit_code == 0
        assert config_path.is_file()
        assert not (tmp_path / "assetsweep.toml").exists()


class TestGlobalOptions:
    """Tests for options of the main application."""

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"assetsweep version {__version__}" in result.stdout

    def test_custom_config_is_used(self, asset_project: Path) -> None:
        """Scans honour a configuration passed with --config."""
        config_path = asset_project / "custom.toml"
        config_path.write_text(
            "[assets]\nmanifest_path = 'reports/assets.json'\n", encoding="utf-8"
        )

        result = runner.invoke(
            app, ["-p", str(asset_project), "-c", str(config_path), "assets", "scan"]
        )

        assert result.exit_code == 0
        assert (asset_project / "reports/assets.json").exists()
