import logging
import os
from dataclasses import dataclass

LOG_LEVEL_ENV = "FRACTIONAL_MONTHS_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from environment variables, keeping defaults for unset or unknown values."""
        level_name = os.getenv(LOG_LEVEL_ENV)
        if level_name is None:
            return cls()

        level_name = level_name.strip().upper()
        if not isinstance(logging.getLevelName(level_name), int):
            return cls()
        return cls(log_level=level_name)

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)
