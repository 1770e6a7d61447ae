"""Unit tests for the BladeComponent model."""

from collections.abc import Callable
from pathlib import Path

import pytest
from assetsweep.components.models import BladeComponent


class TestBladeComponent:
    """Tests for BladeComponent construction and derived names."""

    def test_requires_a_backing_file(self) -> None:
        """A component without view and class path is rejected."""
        with pytest.raises(ValueError, match="needs a view path or a class path"):
            BladeComponent(
                name="ghost",
                view_path=None,
                view_relative_path=None,
                is_class_based=False,
                class_path=None,
                class_relative_path=None,
                class_name=None,
                total_size=0,
            )

    def test_anonymous(self, tmp_path: Path, write: Callable[..., Path]) -> None:
        """Anonymous components are backed by their view only."""
        view = write("resources/views/components/forms/input.blade.php", "<input>")

        component = BladeComponent.anonymous("forms.input", view, tmp_path)

        assert component.view_relative_path == "resources/views/components/forms/input.blade.php"
        assert component.is_class_based is False
        assert component.total_size == len("<input>")
        assert component.tag_name == "x-forms.input"
        assert component.view_name == "components.forms.input"
        assert component.is_inline is False

    def test_class_based_size_covers_both_files(
        self, tmp_path: Path, write: Callable[..., Path]
    ) -> None:
        """Class-based size is the sum of the class and view files."""
        class_path = write("app/View/Components/Alert.php", "<?php class Alert {}")
        view_path = write("resources/views/components/alert.blade.php", "<div></div>")

        component = BladeComponent.class_based(
            name="alert",
            class_path=class_path,
            class_name="App\\View\\Components\\Alert",
            base_path=tmp_path,
            view_path=view_path,
        )

        assert component.total_size == class_path.stat().st_size + view_path.stat().st_size
        assert component.class_relative_path == "app/View/Components/Alert.php"
        assert component.modified_at is not None
        assert component.is_inline is False

    def test_inline(self, tmp_path: Path, write: Callable[..., Path]) -> None:
        """A class-based component without a view renders inline."""
        class_path = write("app/View/Components/Badge.php", "<?php")

        component = BladeComponent.class_based(
            name="badge",
            class_path=class_path,
            class_name="App\\View\\Components\\Badge",
            base_path=tmp_path,
        )

        assert component.is_inline is True
        assert component.view_path is None
        assert component.to_manifest_entry()["view_path"] is None

    def test_from_manifest(self, tmp_path: Path) -> None:
        """Manifest entries are joined onto the project root."""
        entry = {
            "name": "alert",
            "view_path": "resources/views/components/alert.blade.php",
            "is_class_based": True,
            "class_path": "app/View/Components/Alert.php",
            "class_name": "App\\View\\Components\\Alert",
            "size": 42,
            "modified_at": "not a date",
        }

        component = BladeComponent.from_manifest(entry, tmp_path)

        assert component.view_path == tmp_path / "resources/views/components/alert.blade.php"
        assert component.class_path == tmp_path / "app/View/Components/Alert.php"
        assert component.total_size == 42
        assert component.modified_at is None
        assert component.human_size == "42 B"
