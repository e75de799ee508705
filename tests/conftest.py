import logging

import pytest


@pytest.fixture
def diagnostics(caplog):
    """A logger of its own, so tests see only the diagnostics they cause."""
    caplog.set_level(logging.DEBUG, logger="httpdigest.tests")
    return logging.getLogger("httpdigest.tests")
