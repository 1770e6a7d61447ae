"""Project configuration models and TOML I/O.

Configuration lives in ``assetsweep.toml`` at the project root and has
one section per pipeline (``[assets]`` and ``[components]``). Every key
is optional; a missing file yields the defaults below. All paths are
relative to the project root.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Pattern generator switch: on, off, or detect from the project
GeneratorSetting = bool | Literal["auto"]


class AssetConfig(BaseModel):
    """Configuration for the image asset pipeline.

    Attributes:
        scan_paths: Directories scanned recursively for images.
        image_extensions: Lowercase extensions treated as images.
        search_paths: Directories searched for references.
        search_extensions: File suffixes searched (compound suffixes allowed).
        exclude_patterns: Globs excluding files from scanning and searching.
        protected_patterns: Globs for assets that are never reported unused.
        manifest_path: Manifest file location.
        backup_before_delete: Copy files to the backup tree before deleting.
        backup_path: Backup tree root.
        root_config_files: Extra files searched for references.
        pattern_generators: Generator key to enabled/disabled/"auto".
    """

    model_config = ConfigDict(extra="forbid")

    scan_paths: Annotated[
        list[str],
        Field(default_factory=lambda: ["public", "resources"]),
    ]
    image_extensions: Annotated[
        list[str],
        Field(
            default_factory=lambda: [
                "jpg",
                "jpeg",
                "png",
                "gif",
                "svg",
                "webp",
                "ico",
                "bmp",
                "tiff",
                "tif",
                "avif",
            ]
        ),
    ]
    search_paths: Annotated[
        list[str],
        Field(default_factory=lambda: ["app", "resources", "routes", "config", "database"]),
    ]
    search_extensions: Annotated[
        list[str],
        Field(
            default_factory=lambda: [
                # PHP & Blade
                "php",
                "blade.php",
                # JavaScript & TypeScript
                "js",
                "jsx",
                "ts",
                "tsx",
                "vue",
                "svelte",
                # Styles
                "css",
                "scss",
                "sass",
                "less",
                "styl",
                # Config & data
                "json",
                "yaml",
                "yml",
                # Docs
                "md",
                "mdx",
            ]
        ),
    ]
    exclude_patterns: Annotated[
        list[str],
        Field(
            default_factory=lambda: [
                "**/node_modules/**",
                "**/vendor/**",
                "**/.git/**",
                "**/cache/**",
                "**/storage/framework/**",
                "**/public/build/**",
            ]
        ),
    ]
    protected_patterns: Annotated[
        list[str],
        Field(
            default_factory=lambda: [
                "**/favicon.ico",
                "**/favicon.png",
                "**/apple-touch-icon*.png",
                "**/logo.*",
            ]
        ),
    ]
    manifest_path: str = "unused-assets.json"
    backup_before_delete: bool = True
    backup_path: str = ".asset-cleaner-backup"
    root_config_files: Annotated[list[str], Field(default_factory=list)]
    pattern_generators: Annotated[
        dict[str, GeneratorSetting],
        Field(default_factory=lambda: {"blade_icons": "auto"}),
    ]


class ComponentConfig(BaseModel):
    """Configuration for the Blade component pipeline.

    Attributes:
        anonymous_paths: Directories holding anonymous (file-only) components.
        class_paths: Directories holding class-based component classes.
        search_paths: Directories searched for references.
        search_extensions: File suffixes searched.
        exclude_patterns: Globs excluding files from scanning and searching.
        protected_patterns: Globs over component names never reported unused.
        manifest_path: Manifest file location.
        backup_before_delete: Copy files to the backup tree before deleting.
        backup_path: Backup tree root.
        views_path: Root of the view tree.
        class_namespace: Namespace prefix stripped when naming class components.
        component_base_classes: Fully qualified base classes marking components.
    """

    model_config = ConfigDict(extra="forbid")

    anonymous_paths: Annotated[
        list[str],
        Field(default_factory=lambda: ["resources/views/components"]),
    ]
    class_paths: Annotated[
        list[str],
        Field(default_factory=lambda: ["app/View/Components"]),
    ]
    search_paths: Annotated[
        list[str],
        Field(default_factory=lambda: ["resources/views", "app", "routes", "config"]),
    ]
    search_extensions: Annotated[
        list[str],
        Field(default_factory=lambda: ["blade.php", "php"]),
    ]
    exclude_patterns: Annotated[
        list[str],
        Field(default_factory=lambda: ["**/vendor/**", "**/node_modules/**"]),
    ]
    protected_patterns: Annotated[
        list[str],
        Field(default_factory=lambda: ["layout", "layouts.*", "app-layout"]),
    ]
    manifest_path: str = "unused-components.json"
    backup_before_delete: bool = True
    backup_path: str = ".blade-cleaner-backup"
    views_path: str = "resources/views"
    class_namespace: str = "App\\View\\Components"
    component_base_classes: Annotated[
        list[str],
        Field(default_factory=lambda: ["Illuminate\\View\\Component"]),
    ]


class SweepConfig(BaseModel):
    """Complete project configuration.

    Attributes:
        assets: Image asset pipeline settings.
        components: Blade component pipeline settings.
    """

    model_config = ConfigDict(extra="forbid")

    assets: Annotated[AssetConfig, Field(default_factory=AssetConfig)]
    components: Annotated[ComponentConfig, Field(default_factory=ComponentConfig)]


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the configuration file is not valid TOML."""


class ConfigValidationError(ConfigError):
    """Raised when the configuration content does not match the schema."""


def load_config(path: Path) -> SweepConfig:
    """Load and validate configuration from a TOML file.

    A missing file is not an error: the defaults are returned.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated SweepConfig.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
        ConfigError: If the file cannot be read.
    """
    if not path.exists():
        return SweepConfig()

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {path}: {e}") from e

    try:
        return SweepConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content in {path}: {e}") from e


def save_config(config: SweepConfig, path: Path) -> Path:
    """Write configuration to a TOML file atomically.

    Args:
        config: Configuration to save.
        path: Destination file.

    Returns:
        Path where the configuration was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    data: dict[str, Any] = config.model_dump()

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(mode="wb", dir=path.parent, delete=False, suffix=".tmp") as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config {path}: {e}") from e

    return path
