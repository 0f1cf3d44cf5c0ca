"""Engine configuration"""

import os
from typing import Self

from pydantic import BaseModel, ConfigDict, field_validator

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class EngineConfig(BaseModel):
    """
    Tunable parts of the rules engine.
    ----

    * draw_window: number of consecutive half-moves without a pawn move or capture that ends the game in a draw.
    * log_level: minimum level for the loguru sink (see src/core/logging.py)
    """

    model_config = ConfigDict(frozen=True)

    draw_window: int = 50
    log_level: str = "WARNING"

    @field_validator("draw_window")
    @classmethod
    def validate_draw_window(cls, value: int) -> int:
        if value <= 0:
            raise ValueError(f"draw_window must be positive, got {value}")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {value!r}. Pick one from {','.join(LOG_LEVELS)}"
            )
        return level

    @classmethod
    def from_env(cls) -> Self:
        """Read overrides from CHESS_DRAW_WINDOW / CHESS_LOG_LEVEL, falling back on the defaults"""
        overrides: dict[str, str] = {}
        if "CHESS_DRAW_WINDOW" in os.environ:
            overrides["draw_window"] = os.environ["CHESS_DRAW_WINDOW"]
        if "CHESS_LOG_LEVEL" in os.environ:
            overrides["log_level"] = os.environ["CHESS_LOG_LEVEL"]
        return cls.model_validate(overrides)
