"""Default marks for tests under `tests/unit/`.

Every test collected here gets the ``unit`` mark, so ``pytest -m unit`` runs
the fast suite without listing directories.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

UNIT_ROOT = Path(__file__).parent.resolve()


def _is_unit_test(item: pytest.Item) -> bool:
    return UNIT_ROOT in item.path.resolve().parents


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark unit tests that do not carry the mark already."""
    for item in filter(_is_unit_test, items):
        if item.get_closest_marker("unit") is None:
            item.add_marker(pytest.mark.unit)
