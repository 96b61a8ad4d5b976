import logging

import pytest

from treeval.logging import initialize_logger


@pytest.fixture(scope="session", autouse=True)
def setup_log_context_var_fixture():
    """
    Set up the logging configuration. This fixture is automatically used by pytest.
    """
    clear_logger = initialize_logger(logging.getLogger("treeval-tests"))
    yield
    clear_logger()
