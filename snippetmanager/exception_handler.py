import logging
import sys
from typing import Any, Dict, Optional, TextIO

from .errors import SnippetError, UsageError

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


class ErrorHandler:
    """Centralized logging and error reporting for the snippet CLI."""

    def __init__(self, log_level: str = "WARNING", stream: Optional[TextIO] = None):
        self.logger = self._setup_logging(log_level)
        self.stream = stream

    def _setup_logging(self, level: str) -> logging.Logger:
        """Configure the package logger once per process."""
        logger = logging.getLogger("snippet_manager")
        logger.setLevel(getattr(logging, level.upper()))

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    def handle_error(self, error: Exception, context: Dict[str, Any]) -> int:
        """Report ``error`` on stderr and return the exit code to use."""
        error_info = {
            "type": type(error).__name__,
            "message": str(error),
            "context": context,
        }

        if isinstance(error, SnippetError):
            self.logger.debug(
                f"{error_info['type']}: {error_info['message']} | Context: {context}"
            )
        else:
            # Anything outside the taxonomy is a bug; keep the traceback.
            self.logger.error(
                f"{error_info['type']}: {error_info['message']} | Context: {context}",
                exc_info=error,
            )

        prefix = context.get("prefix")
        message = f"{prefix}: {error}" if prefix else str(error)
        print(message, file=self.stream or sys.stderr)

        if isinstance(error, UsageError):
            return EXIT_USAGE
        return EXIT_FAILURE
