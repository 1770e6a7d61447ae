"""Unit tests for component deletion."""

from collections.abc import Callable
from pathlib import Path

from assetsweep.components.models import BladeComponent
from assetsweep.components.operator import ComponentOperator


def _operator(base: Path, backup: bool = True) -> ComponentOperator:
    return ComponentOperator(
        base_path=base,
        backup_before_delete=backup,
        backup_path=".blade-cleaner-backup",
    )


def _alert(base: Path) -> BladeComponent:
    return BladeComponent.class_based(
        name="alert",
        class_path=base / "app/View/Components/Alert.php",
        class_name="App\\View\\Components\\Alert",
        base_path=base,
        view_path=base / "resources/views/components/alert.blade.php",
    )


class TestComponentOperator:
    """Tests for ComponentOperator.delete."""

    def test_class_component_is_removed_as_a_unit(self, component_project: Path) -> None:
        """Both files are backed up and the component counts once."""
        component = _alert(component_project)

        result = _operator(component_project).delete([component])

        assert result.deleted == 1
        assert result.backed_up == 2
        assert result.failed == []
        assert result.total_size == component.total_size
        assert not component.view_path.exists()
        assert not component.class_path.exists()
        (backup_dir,) = (component_project / ".blade-cleaner-backup").iterdir()
        assert (backup_dir / "resources/views/components/alert.blade.php").is_file()
        assert (backup_dir / "app/View/Components/Alert.php").is_file()

    def test_prunes_emptied_directories(self, component_project: Path) -> None:
        """Empty class directories are pruned up to the top-level directory."""
        _operator(component_project, backup=False).delete([_alert(component_project)])

        assert not (component_project / "app/View").exists()
        assert (component_project / "app").is_dir()
        assert (component_project / "resources/views/components").is_dir()

    def test_nested_view_directory(self, tmp_path: Path, write: Callable[..., Path]) -> None:
        """A nested directory is pruned while its non-empty parent stays."""
        write("resources/views/components/button.blade.php", "<button></button>")
        view = write("resources/views/components/nested/deep.blade.php", "<div></div>")
        component = BladeComponent.anonymous("nested.deep", view, tmp_path)

        result = _operator(tmp_path, backup=False).delete([component])

        assert result.deleted == 1
        assert not (tmp_path / "resources/views/components/nested").exists()
        assert (tmp_path / "resources/views/components").is_dir()

    def test_only_existing_files_are_deleted(self, component_project: Path) -> None:
        """A class component whose view vanished still loses its class file."""
        component = _alert(component_project)
        component.view_path.unlink()

        result = _operator(component_project).delete([component])

        assert result.deleted == 1
        assert result.backed_up == 1
        assert not component.class_path.exists()

    def test_missing_component(self, tmp_path: Path) -> None:
        """A component with no files on disk is reported."""
        component = BladeComponent.from_manifest(
            {"name": "ghost", "view_path": "resources/views/components/ghost.blade.php"},
            tmp_path,
        )

        result = _operator(tmp_path).delete([component])

        assert result.deleted == 0
        assert result.failed == ["ghost (no files found)"]
        assert not (tmp_path / ".blade-cleaner-backup").exists()

    def test_escaping_file_blocks_whole_component(
        self, tmp_path: Path, write: Callable[..., Path]
    ) -> None:
        """One file outside the root keeps every file of the component."""
        outside = write("Evil.php", "<?php")
        project = tmp_path / "project"
        view = project / "resources/views/components/evil.blade.php"
        view.parent.mkdir(parents=True)
        view.write_text("<div></div>", encoding="utf-8")
        component = BladeComponent.from_manifest(
            {
                "name": "evil",
                "view_path": "resources/views/components/evil.blade.php",
                "is_class_based": True,
                "class_path": "../Evil.php",
            },
            project,
        )

        result = _operator(project).delete([component])

        assert result.deleted == 0
        assert result.failed == ["evil (outside project root)"]
        assert view.exists()
        assert outside.exists()
        assert not (project / ".blade-cleaner-backup").exists()
