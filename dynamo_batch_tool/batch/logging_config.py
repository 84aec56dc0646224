"""
Logging configuration for batch operations.

Verbosity levels map to the -v flag count used by every CLI command.

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Third-party loggers that are only enabled at the highest verbosity
_LIBRARY_LOGGERS = ("boto3", "botocore", "urllib3")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def setup_logging(verbose: int = 0) -> None:
    """
    Configure root logging from a verbosity count.

    Args:
        verbose: 0 = WARNING, 1 = INFO, 2 = DEBUG, 3+ = DEBUG with AWS SDK logs
    """
    if verbose <= 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    root = logging.getLogger()
    root.setLevel(level)

    # Remove existing handlers
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    # Log to stderr so JSON output on stdout stays parseable
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    library_level = logging.DEBUG if verbose >= 3 else logging.WARNING
    for name in _LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)
