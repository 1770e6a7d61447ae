"""Blade component scanner.

Class-based components are found by parsing PHP sources under the class
roots: every class whose parent chain reaches a configured component base
class is a component. Anonymous components are the Blade templates under
the anonymous roots that no class-based component has claimed as its view.
"""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from assetsweep.components.models import BladeComponent
from assetsweep.core.paths import TEMPLATE_SUFFIX
from assetsweep.core.scanner import CandidateScanner
from assetsweep.core.walk import iter_files

logger = logging.getLogger(__name__)

_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_NAMESPACE_RE = re.compile(r"^\s*namespace\s+([\w\\]+)\s*[;{]", re.MULTILINE)
_USE_RE = re.compile(r"^\s*use\s+([^;]+);", re.MULTILINE)
_USE_ITEM_RE = re.compile(r"^\\?([\w\\]+?)(?:\s+as\s+(\w+))?$", re.IGNORECASE)
_CLASS_RE = re.compile(
    r"^\s*((?:(?:final|abstract|readonly)\s+)*)class\s+(\w+)(?:\s+extends\s+(\\?[\w\\]+))?",
    re.MULTILINE | re.IGNORECASE,
)
_RENDER_VIEW_RE = re.compile(r"""return\s+view\s*\(\s*['"]([^'"]+)['"]""")


@dataclass(frozen=True, slots=True)
class PhpClass:
    """A class declaration found in a PHP source file.

    Attributes:
        name: Fully qualified class name, without leading backslash.
        parent: Fully qualified parent class name, if the class extends one.
        parent_is_bare: True if the class lives in the global namespace and
            names its parent without qualification or import.
        is_abstract: Whether the class is declared abstract.
        path: Source file path.
        source: Source text, used to look for a rendered view.
    """

    name: str
    parent: str | None
    parent_is_bare: bool
    is_abstract: bool
    path: Path
    source: str


def _parse_imports(source: str) -> dict[str, str]:
    """Map imported short names (or aliases) to fully qualified names."""
    imports: dict[str, str] = {}

    for match in _USE_RE.finditer(source):
        statement = " ".join(match.group(1).split())
        if statement.lower().startswith(("function ", "const ")):
            continue

        if "{" in statement:
            prefix, _, group = statement.partition("{")
            prefix = prefix.strip().rstrip("\\")
            items = [f"{prefix}\\{item.strip()}" for item in group.rstrip("}").split(",")]
        else:
            items = statement.split(",")

        for item in items:
            item_match = _USE_ITEM_RE.match(item.strip())
            if item_match is None:
                continue
            target, alias = item_match.groups()
            short = alias or target.rsplit("\\", 1)[-1]
            imports[short.lower()] = target

    return imports


def _resolve_name(name: str, namespace: str | None, imports: dict[str, str]) -> str:
    """Resolve a class reference the way PHP name resolution does."""
    if name.startswith("\\"):
        return name.lstrip("\\")

    first, _, rest = name.partition("\\")
    imported = imports.get(first.lower())
    if imported is not None:
        return f"{imported}\\{rest}" if rest else imported

    return f"{namespace}\\{name}" if namespace else name


def parse_php_class(source: str, path: Path) -> PhpClass | None:
    """Extract the first class declaration from PHP source.

    Args:
        source: PHP source text.
        path: File the source was read from.

    Returns:
        PhpClass, or None if the file declares no class.
    """
    code = _BLOCK_COMMENT_RE.sub("", source)

    class_match = _CLASS_RE.search(code)
    if class_match is None:
        return None

    namespace_match = _NAMESPACE_RE.search(code)
    namespace = namespace_match.group(1).strip("\\") if namespace_match else None
    imports = _parse_imports(code)

    modifiers, short_name, parent_name = class_match.groups()
    parent = _resolve_name(parent_name, namespace, imports) if parent_name else None
    parent_is_bare = bool(
        parent_name
        and namespace is None
        and "\\" not in parent_name
        and parent_name.lower() not in imports
    )

    return PhpClass(
        name=f"{namespace}\\{short_name}" if namespace else short_name,
        parent=parent,
        parent_is_bare=parent_is_bare,
        is_abstract="abstract" in modifiers.lower(),
        path=path,
        source=source,
    )


def component_kebab_case(value: str) -> str:
    """Kebab-case a class name segment (e.g., "TextInput" -> "text-input")."""
    value = re.sub(r"([a-z])([A-Z])", r"\1-\2", value)
    value = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1-\2", value)
    value = value.replace("_", "-").lower()
    return re.sub(r"-+", "-", value).strip("-")


def anonymous_component_name(view_path: Path, root: Path) -> str:
    """Derive a component name from a template path below its root.

    ``forms/input.blade.php`` becomes ``forms.input`` and
    ``card/index.blade.php`` becomes ``card``.
    """
    relative = view_path.relative_to(root).as_posix()
    name = relative.removesuffix(TEMPLATE_SUFFIX).replace("/", ".")
    if name.endswith(".index"):
        name = name.removesuffix(".index")
    return name


class ComponentScanner(CandidateScanner[BladeComponent]):
    """Scans project directories for Blade components.

    Args:
        base_path: Project root directory.
        anonymous_paths: Directories holding anonymous components.
        class_paths: Directories holding component classes.
        exclude_patterns: Globs over root-relative paths to skip.
        protected_patterns: Globs over component names never reported unused.
        views_path: Root of the view tree.
        class_namespace: Namespace prefix stripped when naming class components.
        component_base_classes: Fully qualified base classes of components.
    """

    def __init__(
        self,
        *,
        base_path: Path,
        anonymous_paths: Sequence[str],
        class_paths: Sequence[str],
        exclude_patterns: Sequence[str],
        protected_patterns: Sequence[str],
        views_path: str = "resources/views",
        class_namespace: str = "App\\View\\Components",
        component_base_classes: Sequence[str] = ("Illuminate\\View\\Component",),
    ) -> None:
        super().__init__(
            base_path=base_path,
            exclude_patterns=exclude_patterns,
            protected_patterns=protected_patterns,
        )
        self._anonymous_paths = tuple(anonymous_paths)
        self._class_paths = tuple(class_paths)
        self._views_path = views_path
        self._class_prefix = class_namespace.strip("\\") + "\\"
        self._base_classes = frozenset(c.strip("\\").lower() for c in component_base_classes)
        self._base_short_names = frozenset(c.rsplit("\\", 1)[-1] for c in self._base_classes)

    def scan(self) -> list[BladeComponent]:
        """Scan for class-based components, then anonymous ones.

        Returns:
            Class-based components followed by anonymous components.
        """
        class_based = self._scan_class_components()
        claimed = {c.view_path for c in class_based if c.view_path is not None}
        anonymous = self._scan_anonymous_components(claimed)
        return [*class_based, *anonymous]

    def protection_key(self, candidate: BladeComponent) -> str:
        return candidate.name

    def component_name(self, class_name: str) -> str:
        """Derive a component name from a fully qualified class name.

        ``App\\View\\Components\\Forms\\TextInput`` becomes ``forms.text-input``.
        """
        name = class_name.removeprefix(self._class_prefix)
        return ".".join(component_kebab_case(part) for part in name.split("\\"))

    def _scan_class_components(self) -> list[BladeComponent]:
        classes = self._collect_classes()
        registry = {php_class.name.lower(): php_class for php_class in classes}

        components: list[BladeComponent] = []
        for php_class in classes:
            if php_class.is_abstract:
                logger.debug("Skipping abstract class %s", php_class.name)
                continue
            if not self._is_component(php_class, registry):
                continue

            name = self.component_name(php_class.name)
            components.append(
                BladeComponent.class_based(
                    name=name,
                    class_path=php_class.path,
                    class_name=php_class.name,
                    base_path=self._base_path,
                    view_path=self._find_view(name, php_class.source),
                )
            )

        return components

    def _collect_classes(self) -> list[PhpClass]:
        """Parse every PHP class under the class roots."""
        classes: list[PhpClass] = []

        for class_path in self._class_paths:
            for path in iter_files(self._base_path / class_path):
                if not path.name.endswith(".php") or path.name.endswith(TEMPLATE_SUFFIX):
                    continue
                if self.is_excluded(path):
                    continue

                try:
                    source = path.read_text(encoding="utf-8", errors="replace")
                except OSError as e:
                    logger.debug("Skipping unreadable class file %s: %s", path, e)
                    continue

                php_class = parse_php_class(source, path)
                if php_class is not None:
                    classes.append(php_class)

        return classes

    def _is_component(self, php_class: PhpClass, registry: dict[str, PhpClass]) -> bool:
        """Follow the parent chain until a component base class is reached."""
        seen: set[str] = set()
        current = php_class

        while current.parent is not None:
            parent_key = current.parent.lower()
            if parent_key in self._base_classes:
                return True

            parent = registry.get(parent_key)
            if parent is None:
                return current.parent_is_bare and parent_key in self._base_short_names
            if parent_key in seen:
                logger.warning("Circular inheritance involving %s", current.parent)
                return False

            seen.add(parent_key)
            current = parent

        return False

    def _find_view(self, name: str, source: str) -> Path | None:
        """Locate the view file of a class-based component.

        Tries the literal view returned from the class, then the
        conventional ``components/<name>`` template and its ``index``
        variant. Returns None for inline components.
        """
        views_root = self._base_path / self._views_path

        render_match = _RENDER_VIEW_RE.search(source)
        if render_match is not None and "::" not in render_match.group(1):
            view_name = render_match.group(1)
            custom = views_root / f"{view_name.replace('.', '/')}{TEMPLATE_SUFFIX}"
            if custom.is_file():
                return custom

        conventional = views_root / "components" / Path(*name.split("."))
        for candidate in (
            conventional.parent / f"{conventional.name}{TEMPLATE_SUFFIX}",
            conventional / f"index{TEMPLATE_SUFFIX}",
        ):
            if candidate.is_file():
                return candidate

        return None

    def _scan_anonymous_components(self, claimed: set[Path]) -> list[BladeComponent]:
        components: list[BladeComponent] = []

        for anonymous_path in self._anonymous_paths:
            root = self._base_path / anonymous_path
            for path in iter_files(root):
                if not path.name.endswith(TEMPLATE_SUFFIX):
                    continue
                if self.is_excluded(path):
                    continue
                if path in claimed:
                    continue

                name = anonymous_component_name(path, root)
                components.append(BladeComponent.anonymous(name, path, self._base_path))

        return components
