from __future__ import annotations

from pathlib import Path

import pytest

from sqlpilot.utils.logging import set_correlation_id

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture(autouse=True)
def _clear_correlation_id() -> None:
    set_correlation_id(None)
