import logging
import threading
from typing import Any, Dict, Hashable, Optional, Set


class _OnceRegistry:
    """Process-wide record of keys that have already produced a log line."""

    def __init__(self, limit: int = 10000):
        self._keys: Set[Hashable] = set()
        self._lock = threading.Lock()
        self._limit = limit

    def claim(self, key: Hashable) -> bool:
        with self._lock:
            if key in self._keys:
                return False
            if len(self._keys) >= self._limit:
                self._keys.clear()
            self._keys.add(key)
            return True

    def reset(self) -> None:
        with self._lock:
            self._keys.clear()


_once = _OnceRegistry()


class AppLogger:
    """Stdlib logger wrapper that appends bound context as key=value pairs."""

    def __init__(
        self,
        name: str,
        context: Optional[Dict[str, Any]] = None,
        _logger: Optional[logging.Logger] = None,
    ):
        self._logger = _logger or logging.getLogger(name)
        self._name = name
        self._context = context or {}

    @property
    def context(self) -> Dict[str, Any]:
        return dict(self._context)

    def bind(self, **extra: Any) -> "AppLogger":
        """Return a child logger carrying the merged context."""
        return AppLogger(self._name, {**self._context, **extra}, _logger=self._logger)

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, context)

    def warning_once(self, key: Hashable, message: str, **context: Any) -> bool:
        """Emit a warning the first time ``key`` is seen in this process.

        Returns True when the line was written. Used for data-integrity
        problems found on read paths that would otherwise repeat per request.
        """
        if not _once.claim(key):
            return False
        self._log(logging.WARNING, message, context)
        return True

    def error(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, context)

    def exception(self, message: str, **context: Any) -> None:
        """Log at error level with the active exception's traceback."""
        payload = {**self._context, **context}
        self._logger.error(self._format(message, payload), exc_info=True)

    def _log(self, level: int, message: str, context: Dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        payload = {**self._context, **context} if context else dict(self._context)
        self._logger.log(level, self._format(message, payload))

    @staticmethod
    def _format(message: str, context: Dict[str, Any]) -> str:
        if not context:
            return message
        pairs = " ".join(
            f"{key}={AppLogger._stringify(value)}" for key, value in context.items()
        )
        return f"{message} | {pairs}"

    @staticmethod
    def _stringify(value: Any) -> str:
        if isinstance(value, (str, int, float, bool)) or value is None:
            return str(value)
        return repr(value)


def get_logger(name: str) -> AppLogger:
    return AppLogger(name)


def reset_once_registry() -> None:
    _once.reset()
