import logging

import pytest
import structlog

from tree_i18n.services.providers import get_session_registry, get_settings


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    """Drop engine diagnostics for the test session.

    tree_i18n leaves logging to the host; the test suite is the host here.
    """
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
    )
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def reset_providers():
    """Clear application-scoped provider caches around every test.

    The settings and session registry singletons are cached per process;
    without this a session installed by one test would leak into the next.
    """
    get_settings.cache_clear()
    get_session_registry.cache_clear()
    yield
    get_settings.cache_clear()
    get_session_registry.cache_clear()
