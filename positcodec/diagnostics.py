"""Diagnostic sink for advisory codec warnings.

The coordinate codecs never raise on questionable input. Instead they clamp
or carry on and hand a human-readable message to a *reporter*: any callable
taking a single string. Callers inject their own reporter with the ``report=``
keyword; when they don't, the message is logged at WARNING level on the
``positcodec.coords`` logger.
"""

import logging
from collections.abc import Callable

Reporter = Callable[[str], None]

_DEFAULT_LOGGER_NAME = "positcodec"
_CODEC_LOGGER_NAME = "positcodec.coords"
_LOG_FORMAT = "[%(levelname)s] %(message)s"


def get_logger(name: str = _DEFAULT_LOGGER_NAME, level: int = logging.INFO) -> logging.Logger:
    """Return a logger with a single stream handler attached.

    Only applications should call this; the library itself never adds
    handlers. Calling it again for the same name adjusts the level without
    stacking handlers.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def log_report(message: str) -> None:
    """Default reporter: log the message as a warning."""
    logging.getLogger(_CODEC_LOGGER_NAME).warning(message)


def resolve_reporter(report: Reporter | None) -> Reporter:
    """Return *report*, or the logging reporter when none was given."""
    if report is None:
        return log_report
    return report


class WarningCollector:
    """Reporter that keeps every message it receives.

    Useful when warnings must be returned to a caller instead of logged::

        warnings = WarningCollector()
        field = latitude_to_str(95.0, report=warnings)
        warnings.messages  # ['Latitude is greater than 90.  Changing to 90.']
    """

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def __len__(self) -> int:
        return len(self.messages)
