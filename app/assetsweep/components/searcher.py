"""Reference search for Blade components."""

from collections.abc import Sequence
from pathlib import Path

from assetsweep.components.models import BladeComponent
from assetsweep.core.paths import TEMPLATE_SUFFIX
from assetsweep.core.searcher import ReferenceSearcher, unique_patterns


def _quoted(prefix: str, value: str) -> list[str]:
    """Build the single- and double-quoted forms of a call's first argument."""
    return [f"{prefix}'{value}'", f'{prefix}"{value}"']


class ComponentReferenceSearcher(ReferenceSearcher[BladeComponent]):
    """Finds references to Blade components in templates and PHP code.

    Args:
        base_path: Project root directory.
        search_paths: Directories searched recursively.
        search_extensions: Accepted file suffixes.
        exclude_patterns: Globs over root-relative paths to skip.
        views_path: Root of the view tree, stripped when deriving view
            names from template paths.
    """

    def __init__(
        self,
        *,
        base_path: Path,
        search_paths: Sequence[str],
        search_extensions: Sequence[str],
        exclude_patterns: Sequence[str],
        views_path: str = "resources/views",
    ) -> None:
        super().__init__(
            base_path=base_path,
            search_paths=search_paths,
            search_extensions=search_extensions,
            exclude_patterns=exclude_patterns,
        )
        self._views_prefix = views_path.replace("\\", "/").strip("/") + "/"

    def search_patterns(self, candidate: BladeComponent) -> list[str]:
        """Build the search strings for a component.

        Covers tags, dynamic components, the @component and @include
        directives, view() calls and class references.
        """
        name = candidate.name
        view_name = candidate.view_name
        conventional = f"components.{name}"

        patterns = [
            f"<{candidate.tag_name}",
            f'component="{name}"',
            f"component='{name}'",
            f":component=\"'{name}'\"",
            *_quoted("@component(", view_name),
            *_quoted("@component(", name),
        ]

        if candidate.is_class_based and candidate.class_name:
            patterns.append(f"{candidate.class_name}::class")
            short_name = candidate.class_name.rsplit("\\", 1)[-1]
            if short_name != candidate.class_name:
                patterns.append(f"{short_name}::class")

        patterns.extend(_quoted("view(", view_name))
        patterns.extend(_quoted("view(", conventional))
        patterns.extend(_quoted("@include(", view_name))
        patterns.extend(_quoted("@include(", conventional))

        path_view_name = self.view_name_from_path(candidate.view_relative_path)
        if path_view_name is not None and path_view_name not in (view_name, conventional):
            patterns.extend(_quoted("view(", path_view_name))

        return unique_patterns(patterns)

    def view_name_from_path(self, view_relative_path: str | None) -> str | None:
        """Derive a dotted view name from a template path.

        ``resources/views/mail/header.blade.php`` becomes ``mail.header``.
        """
        if not view_relative_path:
            return None
        view = view_relative_path.replace("\\", "/")
        view = view.removeprefix(self._views_prefix).removesuffix(TEMPLATE_SUFFIX)
        return view.replace("/", ".")
