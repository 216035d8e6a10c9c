"""Root logger configuration, applied once at application startup."""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Attach a console handler to the root logger and set its level.

    Does nothing if the root logger already has handlers (e.g. under pytest
    or when uvicorn configured logging first).
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
