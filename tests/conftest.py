"""Pytest configuration for the wrapped-error test suite."""

import logging
import sys
from pathlib import Path
from typing import Iterator

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    """Drop handlers installed by ``configure_logging`` and reset context."""
    from packages.wrapped_error.logging import clear_context

    root = logging.getLogger()
    existing = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        for handler in list(root.handlers):
            if handler not in existing:
                root.removeHandler(handler)
        root.setLevel(level)
        clear_context()
