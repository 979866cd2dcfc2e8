"""Game wide constants + runtime settings (board size, log level)."""

import os
import sys
from typing import Optional, Self

from loguru import logger
from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError

# The grid is smaller than a standard chess board, but can be tweaked between these limits.
MIN_BOARD_SIZE = 6
MAX_BOARD_SIZE = 12
DEFAULT_BOARD_SIZE = 8

# The developer moves at most this many squares along one direction.
SLIDER_RANGE = 3

DEFAULT_LOG_LEVEL = "WARNING"
# loguru's built-in levels
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def is_valid_board_size(value: int) -> bool:
    return MIN_BOARD_SIZE <= value <= MAX_BOARD_SIZE


def validate_board_size(value: int) -> int:
    if not is_valid_board_size(value):
        raise InvalidRequestError(
            f"Board dimensions must lie between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}. Got: {value}"
        )
    return value


class GameSettings(BaseModel):
    """Board size left as None means: ask the player"""

    width: Optional[int] = None
    height: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("width", "height")
    @classmethod
    def validate_size(cls, value: Optional[int]) -> Optional[int]:
        if value is None:
            return value
        return validate_board_size(value)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise InvalidRequestError(
                f"Unknown log level {value!r}. Pick one from {','.join(LOG_LEVELS)}"
            )
        return level

    @classmethod
    def from_env(cls) -> Self:
        """Read overrides from UNVOID_WIDTH / UNVOID_HEIGHT / UNVOID_LOG_LEVEL"""
        return cls(
            width=_int_from_env("UNVOID_WIDTH"),
            height=_int_from_env("UNVOID_HEIGHT"),
            log_level=os.environ.get("UNVOID_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )


def _int_from_env(name: str) -> Optional[int]:
    value = os.environ.get(name)
    if not value:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise InvalidRequestError(f"{name} must be a whole number. Got: {value!r}") from e


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Replace loguru's default sink with a single stderr sink at the requested level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
