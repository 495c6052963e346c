"""Test configuration and fixtures."""

import os

import logfire
import pytest

# Settings are read from the environment when the container first needs
# them, so these must be set before any test builds one.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")
# bcrypt's minimum work factor; the default makes every hash take ~0.25s
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

logfire.configure(send_to_logfire=False, console=False)


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless JUICEBOX_INTEGRATION=1."""
    if os.environ.get("JUICEBOX_INTEGRATION") == "1":
        return

    skip = pytest.mark.skip(reason="set JUICEBOX_INTEGRATION=1 to run against PostgreSQL")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)
