"""Unit tests for configuration loading and saving."""

from pathlib import Path

import pytest
from assetsweep.core.config import (
    AssetConfig,
    ComponentConfig,
    ConfigParseError,
    ConfigValidationError,
    SweepConfig,
    load_config,
    save_config,
)


class TestDefaults:
    """Tests for configuration defaults."""

    def test_asset_defaults(self) -> None:
        """Asset settings default to the documented values."""
        config = AssetConfig()

        assert config.scan_paths == ["public", "resources"]
        assert "blade.php" in config.search_extensions
        assert "**/node_modules/**" in config.exclude_patterns
        assert config.manifest_path == "unused-assets.json"
        assert config.backup_before_delete is True
        assert config.backup_path == ".asset-cleaner-backup"
        assert config.root_config_files == []
        assert config.pattern_generators == {"blade_icons": "auto"}

    def test_component_defaults(self) -> None:
        """Component settings default to the documented values."""
        config = ComponentConfig()

        assert config.anonymous_paths == ["resources/views/components"]
        assert config.class_paths == ["app/View/Components"]
        assert config.protected_patterns == ["layout", "layouts.*", "app-layout"]
        assert config.manifest_path == "unused-components.json"
        assert config.backup_path == ".blade-cleaner-backup"
        assert config.class_namespace == "App\\View\\Components"
        assert config.component_base_classes == ["Illuminate\\View\\Component"]

    def test_default_lists_are_independent(self) -> None:
        """Mutating one instance's list does not leak into another."""
        first = AssetConfig()
        first.scan_paths.append("storage")

        assert AssetConfig().scan_paths == ["public", "resources"]


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        """A missing file means all defaults."""
        assert load_config(tmp_path / "assetsweep.toml") == SweepConfig()

    def test_partial_file_overrides_only_given_keys(self, tmp_path: Path) -> None:
        """Keys not present in the file keep their defaults."""
        path = tmp_path / "assetsweep.toml"
        path.write_text(
            '[assets]\nscan_paths = ["static"]\nroot_config_files = ["tailwind.config.js"]\n'
            "[assets.pattern_generators]\nblade_icons = false\n"
            '[components]\nbackup_before_delete = false\n'
        )

        config = load_config(path)

        assert config.assets.scan_paths == ["static"]
        assert config.assets.root_config_files == ["tailwind.config.js"]
        assert config.assets.pattern_generators == {"blade_icons": False}
        assert config.assets.manifest_path == "unused-assets.json"
        assert config.components.backup_before_delete is False

    def test_invalid_toml_raises_parse_error(self, tmp_path: Path) -> None:
        """Invalid TOML syntax raises ConfigParseError."""
        path = tmp_path / "assetsweep.toml"
        path.write_text("[assets\nscan_paths = ")

        with pytest.raises(ConfigParseError):
            load_config(path)

    def test_unknown_key_raises_validation_error(self, tmp_path: Path) -> None:
        """Unknown keys are rejected."""
        path = tmp_path / "assetsweep.toml"
        path.write_text("[assets]\nscan_dirs = []\n")

        with pytest.raises(ConfigValidationError):
            load_config(path)

    def test_wrong_type_raises_validation_error(self, tmp_path: Path) -> None:
        """Values of the wrong type are rejected."""
        path = tmp_path / "assetsweep.toml"
        path.write_text('[components]\nclass_paths = "app"\n')

        with pytest.raises(ConfigValidationError):
            load_config(path)

    def test_invalid_generator_setting_raises_validation_error(self, tmp_path: Path) -> None:
        """Generator settings accept only true, false or "auto"."""
        path = tmp_path / "assetsweep.toml"
        path.write_text('[assets.pattern_generators]\nblade_icons = "sometimes"\n')

        with pytest.raises(ConfigValidationError):
            load_config(path)


class TestSaveConfig:
    """Tests for save_config."""

    def test_saved_defaults_load_back(self, tmp_path: Path) -> None:
        """A saved configuration loads back unchanged."""
        path = tmp_path / "assetsweep.toml"

        saved = save_config(SweepConfig(), path)

        assert saved == path
        assert load_config(path) == SweepConfig()

    def test_no_temp_files_left_behind(self, tmp_path: Path) -> None:
        """The atomic write leaves only the target file."""
        save_config(SweepConfig(), tmp_path / "assetsweep.toml")

        assert [p.name for p in tmp_path.iterdir()] == ["assetsweep.toml"]
