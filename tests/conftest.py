"""Pytest configuration and fixtures."""

import pytest

from ipcrypt import key_setup, seed_everything

FF_KEY = b"\xff" * 16


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Set up test environment with fixed seed."""
    seed_everything(42)
    yield


@pytest.fixture
def ff_key():
    """Key of 16 0xff bytes, all words 0xffffffff."""
    return key_setup(FF_KEY)
