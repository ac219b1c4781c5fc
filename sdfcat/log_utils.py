import logging
import sys

FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(name, level: int = logging.INFO) -> logging.Logger:
    """Send log records to stderr and return the logger called *name*.

    Replaces any handler already attached to the root logger, so calling it
    twice does not duplicate output.
    """
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    return logging.getLogger(name)
