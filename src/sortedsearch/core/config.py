import logging
import os
from typing import Optional

from pydantic import BaseModel, field_validator

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def is_level_name(value: str) -> bool:
    """Whether ``value`` names a level known to :mod:`logging` (any case)."""
    return isinstance(logging.getLevelName(value.upper()), int)


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = DEFAULT_LOG_FORMAT

    @field_validator("LOG_LEVEL")
    @classmethod
    def check_level(cls, value: str) -> str:
        if not is_level_name(value):
            raise ValueError(f"Unknown log level: {value!r}")
        return value.upper()

    @classmethod
    def load(cls, environ: Optional[dict] = None) -> "Settings":
        """Build settings from environment variables.

        ``SORTEDSEARCH_LOG_LEVEL`` takes precedence over the generic ``LOG_LEVEL``.
        The generic variable is shared with other tools, so values :mod:`logging`
        does not know (``trace``, ``verbose``...) are ignored rather than rejected.
        """
        environ = os.environ if environ is None else environ

        values = {}
        level = environ.get("SORTEDSEARCH_LOG_LEVEL")
        if not level:
            generic = environ.get("LOG_LEVEL")
            if generic and is_level_name(generic):
                level = generic
        if level:
            values["LOG_LEVEL"] = level
        log_format = environ.get("SORTEDSEARCH_LOG_FORMAT")
        if log_format:
            values["LOG_FORMAT"] = log_format

        return cls(**values)
