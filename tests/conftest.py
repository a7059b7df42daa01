"""Root test configuration."""

import logging

import pytest
import structlog
from fakes import FakeRegistryFactory, FakeResolver


def pytest_configure(config):
    """Configure structlog for tests to suppress debug/info output."""
    logging.basicConfig(level=logging.WARNING, force=True)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def ledger():
    """Ordered record of every deploy/attach/setAddress call."""
    return []


@pytest.fixture
def registry_factory(ledger):
    return FakeRegistryFactory(ledger)


@pytest.fixture
def resolver(registry_factory):
    return FakeResolver({"Lib_AddressManager": registry_factory})
