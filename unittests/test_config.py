import logging

import pytest
from pydantic import ValidationError

from treeval import DEFAULT_CONFIG, ValidationConfig
from treeval.logging import initialize_logger, logger


class TestConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.check_mapper_types is True
        assert DEFAULT_CONFIG.log_failures is False

    def test_extra_fields_are_forbidden(self):
        with pytest.raises(ValidationError):
            ValidationConfig(log_everything=True)  # type:ignore[call-arg]

    def test_config_is_frozen(self):
        config = ValidationConfig()
        with pytest.raises(ValidationError):
            config.log_failures = True  # type:ignore[misc]


class TestLogging:
    def test_initialize_and_clear_logger(self):
        previous_logger = logger.get()
        clear_logger = initialize_logger(logging.getLogger("treeval-nested"))
        assert logger.get().name == "treeval-nested"
        clear_logger()
        assert logger.get() is previous_logger

    def test_clear_logger_twice_raises(self):
        clear_logger = initialize_logger(logging.getLogger("treeval-nested"))
        clear_logger()
        with pytest.raises(RuntimeError):
            clear_logger()
