"""
Loguru-backed application logger.

Implements IAppLogger interface for dependency injection.
"""

from typing import Any, Optional

from core.config import get_settings
from core.logger import logger
from interfaces.app_logger import IAppLogger


class LoguruAppLogger(IAppLogger):
    """
    Writes each entry through Loguru with its structured context bound.

    Loguru stamps the time on every record; the console sink configured by
    ``core.logger.setup_logger`` renders it.
    """

    def __init__(self, debug_enabled: Optional[bool] = None, component: str = "api"):
        """
        Args:
            debug_enabled: Emit debug entries (defaults to development mode or DEBUG)
            component: Name bound to every entry
        """
        if debug_enabled is None:
            settings = get_settings()
            debug_enabled = settings.is_development or settings.debug
        self.debug_enabled = debug_enabled
        self._logger = logger.bind(component=component)

    def info(self, message: str, **context: Any) -> None:
        self._logger.bind(**context).info(message)

    def warn(self, message: str, **context: Any) -> None:
        self._logger.bind(**context).warning(message)

    def error(self, message: str, **context: Any) -> None:
        self._logger.bind(**context).error(message)

    def debug(self, message: str, **context: Any) -> None:
        if not self.debug_enabled:
            return
        self._logger.bind(**context).debug(message)


# Global singleton instance
_app_logger: Optional[LoguruAppLogger] = None


def get_app_logger() -> LoguruAppLogger:
    """
    Get or create global LoguruAppLogger instance (singleton).

    Returns:
        LoguruAppLogger instance
    """
    global _app_logger

    if _app_logger is None:
        _app_logger = LoguruAppLogger()

    return _app_logger
