from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from tests._fixtures.source_builder import SourceBuilder


@pytest.fixture
def source_builder(tmp_path: Path) -> SourceBuilder:
    """Provide a reusable Go source writer rooted at the pytest tmp_path."""
    return SourceBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo handler and propagation changes made by ``configure_logging``."""
    yield
    logger = logging.getLogger("commentfold")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
