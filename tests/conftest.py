# Copyright 2026 mfdicom authors. See LICENSE file for details.
"""Fixtures used in different tests."""

import pytest

from mfdicom import config


@pytest.fixture
def fixed_uid():
    """A UID provider that always returns the same UID."""
    return lambda: "1.2.3.4"


@pytest.fixture
def restore_logging():
    handlers = config.logger.handlers[:]
    yield
    config.logger.handlers = handlers
    config.debug(False, False)
