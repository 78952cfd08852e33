"""
Root conftest.py - import path and shared fixtures for the test suite.

Loaded by pytest before any test collection begins, so the tests can import
``domaincoloring`` from a plain checkout.
"""
import logging
import os
import sys

import pytest

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture
def debug_log(caplog):
    """``caplog`` capturing the package's DEBUG records."""
    caplog.set_level(logging.DEBUG, logger="domaincoloring")
    return caplog
