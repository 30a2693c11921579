"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def write_targets_yml(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes targets.yml into a temp directory."""

    def _write(content: str) -> Path:
        path = tmp_path / "targets.yml"
        path.write_text(textwrap.dedent(content))
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """CLI invocations configure the targetcaps logger; undo that after each test."""
    logger = logging.getLogger("targetcaps")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
