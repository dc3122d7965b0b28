"""Console logging for interactive games and batch runs."""

import datetime
import logging


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def configure_logging(verbose=False):
    """Route library loggers to stderr; DEBUG shows suggestions and event dispatch."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
