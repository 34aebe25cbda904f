"""resultkit: Option and Result values for Python.

Public API:
    - Option, Some, NONE: a value that may be absent
    - Result, Ok, Err: a computation that either succeeded or failed
    - UnwrapError: raised by the unsafe accessors
    - Config, configure(): error-provenance settings
"""

from __future__ import annotations

import logging

from resultkit.config import Config, configure, get_config, reset_config
from resultkit.errors import ConfigurationError, ResultKitError, UnwrapError
from resultkit.option import NONE, NoneOption, Option, Some
from resultkit.result import Err, Ok, Result

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultkit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultkit").addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Config",
    "ConfigurationError",
    "Err",
    "NoneOption",
    "Ok",
    "Option",
    "Result",
    "ResultKitError",
    "Some",
    "UnwrapError",
    "configure",
    "get_config",
    "reset_config",
]
