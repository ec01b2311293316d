"""Keep logging configuration from leaking between tests."""

from __future__ import annotations

import logging

import pytest
import structlog

from rc4rng.core.logging.setup import PACKAGE_LOGGER, clear_context


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    clear_context()
    structlog.reset_defaults()

    pkg = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(pkg.handlers):
        if not isinstance(handler, logging.NullHandler):
            pkg.removeHandler(handler)
    pkg.setLevel(logging.NOTSET)
    pkg.propagate = True
