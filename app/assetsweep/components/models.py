"""Blade component domain model.

A component is either anonymous (a single view file) or class based
(a PHP class file with an optional view file). Its logical name is the
dotted name used in tags, e.g. ``forms.input`` for ``<x-forms.input>``.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from assetsweep.core.manifest import format_modified_at, parse_modified_at
from assetsweep.core.paths import relative_to_base, resolve_relative
from assetsweep.utils.sizes import human_file_size


def _stat(path: Path | None) -> tuple[int, int | None]:
    """Return (size, mtime) of a file, or (0, None) if it doesn't exist."""
    if path is None:
        return 0, None
    try:
        stat = path.stat()
    except OSError:
        return 0, None
    return stat.st_size, int(stat.st_mtime)


@dataclass(frozen=True, slots=True)
class BladeComponent:
    """A Blade UI component that may or may not be referenced.

    Attributes:
        name: Dotted logical name (e.g., "forms.input").
        view_path: Absolute view file path, if any.
        view_relative_path: View path relative to the project root.
        is_class_based: Whether the component is backed by a PHP class.
        class_path: Absolute class file path, if class based.
        class_relative_path: Class path relative to the project root.
        class_name: Fully qualified class name (backslash separated).
        total_size: Combined size of the backing files that existed at
            construction time.
        modified_at: Most recent modification time (epoch seconds).
    """

    name: str
    view_path: Path | None
    view_relative_path: str | None
    is_class_based: bool
    class_path: Path | None
    class_relative_path: str | None
    class_name: str | None
    total_size: int
    modified_at: int | None = None

    def __post_init__(self) -> None:
        """Validate that the component has at least one backing file."""
        if self.view_path is None and self.class_path is None:
            msg = f"Component {self.name!r} needs a view path or a class path"
            raise ValueError(msg)

    @classmethod
    def anonymous(cls, name: str, view_path: Path, base_path: Path) -> "BladeComponent":
        """Create a file-only component from its view."""
        size, modified_at = _stat(view_path)
        return cls(
            name=name,
            view_path=view_path,
            view_relative_path=relative_to_base(view_path, base_path),
            is_class_based=False,
            class_path=None,
            class_relative_path=None,
            class_name=None,
            total_size=size,
            modified_at=modified_at,
        )

    @classmethod
    def class_based(
        cls,
        name: str,
        class_path: Path,
        class_name: str,
        base_path: Path,
        view_path: Path | None = None,
    ) -> "BladeComponent":
        """Create a class-backed component, optionally with its view.

        The size covers both files and the modification time is the
        more recent of the two.
        """
        class_size, class_modified = _stat(class_path)
        view_size, view_modified = _stat(view_path)
        modified = [m for m in (class_modified, view_modified) if m]

        return cls(
            name=name,
            view_path=view_path,
            view_relative_path=relative_to_base(view_path, base_path) if view_path else None,
            is_class_based=True,
            class_path=class_path,
            class_relative_path=relative_to_base(class_path, base_path),
            class_name=class_name,
            total_size=class_size + view_size,
            modified_at=max(modified) if modified else None,
        )

    @classmethod
    def from_manifest(cls, entry: Mapping[str, Any], base_path: Path) -> "BladeComponent":
        """Rebuild a component from a manifest entry.

        Args:
            entry: Manifest entry with name, view_path, is_class_based,
                class_path, class_name, size and modified_at keys.
            base_path: Project root the relative paths are joined to.
        """
        view_relative = entry.get("view_path")
        class_relative = entry.get("class_path")
        return cls(
            name=entry["name"],
            view_path=resolve_relative(view_relative, base_path) if view_relative else None,
            view_relative_path=view_relative or None,
            is_class_based=bool(entry.get("is_class_based", False)),
            class_path=resolve_relative(class_relative, base_path) if class_relative else None,
            class_relative_path=class_relative or None,
            class_name=entry.get("class_name"),
            total_size=entry.get("size", 0),
            modified_at=parse_modified_at(entry.get("modified_at")),
        )

    @property
    def tag_name(self) -> str:
        """Tag used in templates (e.g., "x-forms.input")."""
        return f"x-{self.name}"

    @property
    def view_name(self) -> str:
        """View name used by @component and view() (e.g., "components.forms.input")."""
        return f"components.{self.name}"

    @property
    def is_inline(self) -> bool:
        """Whether the component renders inline (class based, no view file)."""
        return self.is_class_based and self.view_path is None

    @property
    def human_size(self) -> str:
        return human_file_size(self.total_size)

    def to_manifest_entry(self) -> dict[str, Any]:
        """Serialize the component as a manifest entry."""
        return {
            "name": self.name,
            "view_path": self.view_relative_path,
            "is_class_based": self.is_class_based,
            "class_path": self.class_relative_path,
            "class_name": self.class_name,
            "size": self.total_size,
            "size_human": self.human_size,
            "modified_at": format_modified_at(self.modified_at),
        }
