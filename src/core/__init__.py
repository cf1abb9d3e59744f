"""Configuration, logging and result envelopes shared across the blog."""

from .config import Config, PropertyNames, load_config, validate_config  # noqa: F401
from .envelope import (
    Envelope,
    ErrorKind,
    Failure,
    GENERIC_FAILURE_REASON,
    Success,
    failure,
    success,
)  # noqa: F401
from .logs import configure_logging  # noqa: F401
