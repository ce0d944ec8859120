"""Logging for the cio_tracker package.

``ContextualLogger`` carries a set of dimensions (key/value pairs) that are
attached to every record it emits, plus an optional message prefix.

Usage:
    from cio_tracker.core.logging import logger

    client_logger = logger.with_context(site_id="abc123")
    client_logger.info("Tracking client ready")
"""

import logging
from typing import Any, Dict, MutableMapping, Optional, Tuple

from cio_tracker.core.config import settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s%(dimensions)s"


class _DimensionsFilter(logging.Filter):
    """Renders record dimensions into a ``dimensions`` attribute for formatting."""

    def filter(self, record: logging.LogRecord) -> bool:
        dims = getattr(record, "dimensions_map", None)
        if dims:
            record.dimensions = " [" + " ".join(f"{k}={v}" for k, v in dims.items()) + "]"
        else:
            record.dimensions = ""
        return True


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that merges bound dimensions into every record."""

    def __init__(
        self,
        logger: logging.Logger,
        dimensions: Optional[Dict[str, Any]] = None,
        prefix: str = "",
    ) -> None:
        """Bind a base logger to dimensions and a message prefix."""
        super().__init__(logger, dimensions or {})
        self.dimensions: Dict[str, Any] = dict(dimensions or {})
        self.prefix = prefix

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra["dimensions_map"] = {**self.dimensions, **extra.get("dimensions_map", {})}
        kwargs["extra"] = extra
        return f"{self.prefix}{msg}", kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger with additional dimensions."""
        return ContextualLogger(self.logger, {**self.dimensions, **dimensions}, self.prefix)

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a new logger that prepends ``prefix`` to every message."""
        return ContextualLogger(self.logger, self.dimensions, self.prefix + prefix)


class LoggerConfigurator:
    """Builds ContextualLoggers with a consistent handler setup."""

    @staticmethod
    def configure_logger(
        name: str, dimensions: Optional[Dict[str, Any]] = None
    ) -> ContextualLogger:
        """Create a logger for ``name`` bound to ``dimensions``.

        A stream handler is attached to the package root logger only once, so
        repeated calls don't duplicate output. The package logger does not
        propagate to the application root logger.
        """
        root = logging.getLogger("cio_tracker")
        if not any(getattr(h, "_cio_tracker", False) for h in root.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(_FORMAT))
            handler.addFilter(_DimensionsFilter())
            handler._cio_tracker = True  # type: ignore[attr-defined]
            root.addHandler(handler)
            # Handled here only, not again by the root logger
            root.propagate = False
            root.setLevel(settings.LOG_LEVEL.upper())
        return ContextualLogger(logging.getLogger(name), dimensions)


logger = LoggerConfigurator.configure_logger("cio_tracker")
