"""Project-relative path helpers and default file locations.

All configured paths are relative to a single project root. These
helpers convert between absolute paths and the posix-style relative
paths stored in manifests and matched against globs.
"""

from pathlib import Path

# Default configuration file name, looked up at the project root
CONFIG_FILENAME = "assetsweep.toml"

# Blade template suffix shared by scanners and searchers
TEMPLATE_SUFFIX = ".blade.php"


def get_config_path(base_path: Path) -> Path:
    """Get the default configuration file path for a project.

    Args:
        base_path: Project root directory.

    Returns:
        Path to <base_path>/assetsweep.toml.
    """
    return base_path / CONFIG_FILENAME


def relative_to_base(path: Path, base_path: Path) -> str:
    """Express a path relative to the project root, posix style.

    Paths outside the project root are returned unchanged (as posix).

    Args:
        path: Absolute path inside the project.
        base_path: Project root directory.

    Returns:
        Relative path using forward slashes (e.g., "public/images/logo.png").
    """
    try:
        return path.relative_to(base_path).as_posix()
    except ValueError:
        return path.as_posix()


def resolve_relative(relative: str, base_path: Path) -> Path:
    """Join a manifest-style relative path onto the project root.

    Args:
        relative: Relative path with forward or back slashes.
        base_path: Project root directory.

    Returns:
        Absolute path inside the project.
    """
    return base_path / Path(relative.replace("\\", "/"))
