"""
This module provides a class to hold configuration values for the validation engine.
"""

from pydantic import BaseModel, ConfigDict


class ValidationConfig(BaseModel):
    """
    The settings used while invoking a validator tree are stored in instances of this class.
    It allows you to change the behaviour of the engine without rebuilding the tree.
    Instances are frozen because validator trees are shared between threads.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    check_mapper_types: bool = True
    """
    If true, every mapper with a declared `result_type` checks the mapped value with typeguard. A mismatch is raised
    as MapperError. Disable it in hot paths once your trees are known to be correct.
    """

    log_failures: bool = False
    """
    If true, node validators log every invalid result on debug level (using the context logger). This is noisy and
    therefore off by default.
    """


DEFAULT_CONFIG = ValidationConfig()
