"""Schema management for SQL-backed providers.

The in-memory provider needs no schema, so both helpers skip it.
"""

from protean.domain import Domain
from sqlalchemy import create_engine

from supply.utils.logging import get_logger

logger = get_logger(__name__)

SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    for name, provider in domain.providers.items():
        if provider.conn_info["provider"] in SQL_PROVIDERS:
            yield name, provider


def setup_db(domain: Domain):
    """Create tables for every aggregate stored in a SQL provider."""
    with domain.domain_context():
        for name, provider in _sql_providers(domain):
            # Tables are only known to the provider's metadata once a DAO exists.
            for _, record in domain.registry.aggregates.items():
                if record.cls.meta_.provider == name:
                    domain.repository_for(record.cls)._dao  # noqa: B018

            provider._metadata.create_all(create_engine(provider.conn_info["database_uri"]))
            logger.info("schema_created", provider=name)


def drop_db(domain: Domain):
    """Drop all tables created by ``setup_db``."""
    with domain.domain_context():
        for name, provider in _sql_providers(domain):
            provider._metadata.drop_all(create_engine(provider.conn_info["database_uri"]))
            logger.info("schema_dropped", provider=name)
