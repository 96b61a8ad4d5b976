"""
Sets up the logging for the treeval package. The logger is stored inside a ContextVar to support concurrent
validation in e.g. web services where each request wants its own logger.
"""
import logging
from contextvars import ContextVar
from typing import Callable

logger: ContextVar[logging.Logger] = ContextVar("logger", default=logging.getLogger("treeval-unbound"))


def initialize_logger(context_specific_logger: logging.Logger) -> Callable[[], None]:
    """
    Initialize the logger context variable. You should use the returned teardown function to clear the context variable
    once you are done validating in this context.
    """
    token = logger.set(context_specific_logger)

    def clear_logger():
        """
        Reset the logger context variable to the logger that was bound before `initialize_logger` was called.
        It must be called once, from the same context that called `initialize_logger`. A second call raises a
        RuntimeError.
        """
        logger.reset(token)

    return clear_logger
