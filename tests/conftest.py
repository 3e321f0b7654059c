from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.template_builder import TemplateDirBuilder


@pytest.fixture
def template_dir(tmp_path: Path) -> TemplateDirBuilder:
    """Provide a reusable template directory rooted at the pytest tmp_path."""
    return TemplateDirBuilder(tmp_path)
