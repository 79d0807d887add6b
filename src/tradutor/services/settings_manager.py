"""Settings Manager - Handles translator configuration from the environment."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class SettingsManager:
    """
    Manages settings for the translation client.

    Reads values from a .env file in the project root, falling back to the
    process environment. The API endpoint and language list are not
    configurable.
    """

    DEFAULT_TIMEOUT = 10.0
    DEFAULT_LOG_LEVEL = "INFO"

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, uses the repository root above src/.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_contact_email(self) -> Optional[str]:
        """Get the MyMemory contact email from environment."""
        return self._get("MYMEMORY_EMAIL")

    def get_request_timeout(self) -> float:
        """Get the HTTP timeout in seconds, falling back to the default on bad values."""
        raw = self._get("TRANSLATOR_TIMEOUT")
        if raw is None:
            return self.DEFAULT_TIMEOUT
        try:
            timeout = float(raw)
        except ValueError:
            return self.DEFAULT_TIMEOUT
        return timeout if timeout > 0 else self.DEFAULT_TIMEOUT

    def get_log_level(self) -> int:
        """Get the logging level, INFO if unset or unknown."""
        name = (self._get("TRANSLATOR_LOG_LEVEL") or self.DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
