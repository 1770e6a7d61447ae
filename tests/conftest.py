"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

WriteFile = Callable[..., Path]

ALERT_CLASS = """<?php

namespace App\\View\\Components;

use Illuminate\\View\\Component;

class Alert extends Component
{
    public function render()
    {
        return view('components.alert');
    }
}
"""


@pytest.fixture
def write(tmp_path: Path) -> WriteFile:
    """Return a helper that writes a file below tmp_path, creating parents."""

    def _write(relative: str, content: str | bytes = "") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def asset_project(tmp_path: Path, write: WriteFile) -> Path:
    """Small project with used, unused, protected and excluded images."""
    write("public/images/logo.png", b"\x89PNG logo")
    write("public/images/hero.jpg", b"hero-bytes")
    write("public/images/unused.png", b"unused-bytes")
    write("public/cache/cached.png", b"cached")
    write("resources/images/icon.svg", "<svg></svg>")
    write(
        "resources/views/welcome.blade.php",
        '<img src="{{ asset(\'images/hero.jpg\') }}">\n<img src="/images/icon.svg">\n',
    )
    write("app/Http/Controllers/HomeController.php", "<?php\nclass HomeController {}\n")
    return tmp_path


@pytest.fixture
def component_project(tmp_path: Path, write: WriteFile) -> Path:
    """Small project with anonymous and class-based components."""
    write("resources/views/components/button.blade.php", "<button>{{ $slot }}</button>")
    write("resources/views/components/forms/input.blade.php", '<input type="text" />')
    write("resources/views/components/card/index.blade.php", "<div>{{ $slot }}</div>")
    write("resources/views/components/alert.blade.php", "<div class=\"alert\"></div>")
    write("resources/views/components/layout.blade.php", "<html>{{ $slot }}</html>")
    write("app/View/Components/Alert.php", ALERT_CLASS)
    write(
        "resources/views/welcome.blade.php",
        "<x-layout>\n    <x-button>Go</x-button>\n    <x-forms.input />\n</x-layout>\n",
    )
    return tmp_path
