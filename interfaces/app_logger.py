"""
Application Logger Interface - Severity-level logging injected into handlers.
"""

from abc import ABC, abstractmethod
from typing import Any


class IAppLogger(ABC):
    """
    Abstract interface for application logging.

    Each call is synchronous and self-contained. Keyword arguments are
    structured context attached to the entry.

    Implementations:
    - infrastructure.logging.loguru_logger.LoguruAppLogger
    """

    @abstractmethod
    def info(self, message: str, **context: Any) -> None:
        pass

    @abstractmethod
    def warn(self, message: str, **context: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **context: Any) -> None:
        pass

    @abstractmethod
    def debug(self, message: str, **context: Any) -> None:
        """Log a debug entry. No-op unless debug logging is enabled."""
        pass
