"""Application configuration loaded from environment variables."""

import logging
import os
from dataclasses import dataclass

from spot_the_plane.exceptions import InvalidSettingError


@dataclass(frozen=True, slots=True)
class Settings:
    """Application settings populated from environment variables."""

    observer_file: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables.

        Returns:
            A frozen Settings instance with values from the environment.

        Raises:
            InvalidSettingError: If the log level is not a known logging level name.
        """
        default_file = os.path.join(os.path.expanduser("~"), ".spot_the_plane", "observer.json")
        log_level = os.getenv("SPOT_THE_PLANE_LOG_LEVEL", "WARNING").upper()
        # getLevelName maps a known name back to its numeric level
        if not isinstance(logging.getLevelName(log_level), int):
            raise InvalidSettingError(
                f"Invalid SPOT_THE_PLANE_LOG_LEVEL: '{log_level}'. "
                "Expected one of DEBUG, INFO, WARNING, ERROR, CRITICAL."
            )
        return cls(
            observer_file=os.getenv("SPOT_THE_PLANE_OBSERVER_FILE", default_file),
            log_level=log_level,
        )
