from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
import sys

import pytest


# Ensure `import geoutil` works when pytest chooses an import mode that
# doesn't automatically add the project root to sys.path.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    # Settings are lru_cached; env overrides in one test must not leak.
    from geoutil.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def white_house():
    from geoutil.models import Coordinate

    return Coordinate(38.897872, -77.036510)
