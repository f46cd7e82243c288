"""Command-line configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_EXPRESSION = "3 + 5 * (2 - 8)"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class CalcConfig:
    """Settings for the calcpipe command line.

    The evaluation pipeline itself takes no configuration.
    """

    log_level: str = DEFAULT_LOG_LEVEL
    default_expression: str = DEFAULT_EXPRESSION

    def __post_init__(self) -> None:
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls) -> CalcConfig:
        """Create config from environment variables.

        Resolution order for each setting:
        1. CALCPIPE_LOG_LEVEL / CALCPIPE_EXPRESSION env vars
        2. Defaults: WARNING, and the sample expression "3 + 5 * (2 - 8)"
        """
        return cls(
            log_level=os.environ.get("CALCPIPE_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
            default_expression=os.environ.get("CALCPIPE_EXPRESSION") or DEFAULT_EXPRESSION,
        )

    @property
    def level(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)
