import sys
from collections.abc import Callable
from pathlib import Path

import pytest

PROJECT_DIR = Path(__file__).resolve().parent.parent
if str(PROJECT_DIR) not in sys.path:
    sys.path.insert(0, str(PROJECT_DIR))

import header_parser  # noqa: E402


@pytest.fixture
def make_header() -> Callable[..., str]:
    def _make_header(
        *,
        title: str = "// Type definitions for foo 1.2",
        project: str = "// Project: https://github.com/foo/foo",
        contributors: str = "// Definitions by: My Self <https://github.com/me>",
        definitions: str = "// Definitions: https://github.com/DefinitelyTyped/DefinitelyTyped",
        version_line: str | None = None,
        trailer: str = "\n...file content...",
    ) -> str:
        lines = [title, project, contributors, definitions]
        if version_line is not None:
            lines.append(version_line)
        return "\n".join(lines) + "\n" + trailer

    return _make_header


@pytest.fixture
def small_registry() -> header_parser.VersionRegistry:
    return header_parser.VersionRegistry(
        ("3.8", "3.9", "4.0", "4.1"),
        first_supported="4.0",
    )
