"""Global pytest configuration for SCALARCODEC.

Tests are marked after the top-level directory they live in
(`tests/unit/` → ``unit``, `tests/contract/` → ``contract``,
`tests/e2e/` → ``e2e``) unless they already carry that mark.
"""

from __future__ import annotations

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKS = ("unit", "contract", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the directory mark to every collected item."""
    for item in items:
        relative = item.path.resolve().relative_to(TESTS_ROOT)
        mark_name = relative.parts[0] if len(relative.parts) > 1 else None
        if mark_name not in DIRECTORY_MARKS:
            continue
        if not any(marker.name == mark_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, mark_name))
