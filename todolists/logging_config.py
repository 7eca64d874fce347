"""Process-wide logging setup for the CLI and the HTTP server."""

import logging

_CONFIGURED = False

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install one stream handler on the root logger.

    Calling it again only updates the level. The uvicorn loggers are set to
    the same level and routed through the root handler.
    """
    global _CONFIGURED

    resolved_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    root = logging.getLogger()

    if not _CONFIGURED:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        _CONFIGURED = True

    root.setLevel(resolved_level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        logger.setLevel(resolved_level)
        logger.handlers.clear()
        logger.propagate = True
