"""Shared BDD fixtures for the Supply domain."""

import pytest


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@pytest.fixture()
def context():
    """Scratch space shared between the steps of one scenario."""
    return {}
