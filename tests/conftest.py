import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Set the config environment before any domain module is imported, so the
    logging and Protean configuration pick it up.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def supply_domain(request):
    """Initialize the supply domain and its schema once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from supply.domain import supply
    from supply.utils.db import drop_db, setup_db

    supply.init()
    setup_db(supply)

    yield supply

    drop_db(supply)


@pytest.fixture()
def supply_context(supply_domain):
    """Push the domain context for one test and reset all stored data afterwards."""
    ctx = supply_domain.domain_context()
    ctx.push()

    yield supply_domain

    for _, provider in supply_domain.providers.items():
        provider._data_reset()

    supply_domain.event_store.store._data_reset()
    ctx.pop()
