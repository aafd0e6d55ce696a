"""Runtime settings for scicalc.

Each setting has a default and can be overridden from the environment:

    SCICALC_ERROR_REVERT_S    seconds an error message stays up (2.0)
    SCICALC_MESSAGE_REVERT_S  seconds a confirmation stays up (1.0)
    SCICALC_DISPLAY_WIDTH     characters before long numbers go scientific (12)
    SCICALC_LOG_LEVEL         logging level name (WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass
class Settings:
    error_revert_s: float = 2.0
    message_revert_s: float = 1.0
    display_width: int = 12
    log_level: str = "WARNING"

    def validate(self) -> None:
        if self.error_revert_s < 0 or self.message_revert_s < 0:
            raise ValueError("revert delays must be non-negative")
        if self.display_width < 8:
            raise ValueError("display_width must be at least 8")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log level: {self.log_level}")

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level.upper())

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from SCICALC_* variables, falling back to defaults.

        Raises:
            ValueError: if a variable is set to something unparseable.
        """
        env = os.environ if env is None else env
        settings = cls(
            error_revert_s=float(env.get("SCICALC_ERROR_REVERT_S", cls.error_revert_s)),
            message_revert_s=float(env.get("SCICALC_MESSAGE_REVERT_S", cls.message_revert_s)),
            display_width=int(env.get("SCICALC_DISPLAY_WIDTH", cls.display_width)),
            log_level=env.get("SCICALC_LOG_LEVEL", cls.log_level),
        )
        settings.validate()
        return settings
