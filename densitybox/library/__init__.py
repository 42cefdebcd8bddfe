# densitybox/library/__init__.py

from .library_script import (
    CustomFormatter,
    Logger,
    PlainFormatter,
    SameLineStreamHandler,
    get_logger,
)

__all__ = [
    "CustomFormatter",
    "Logger",
    "PlainFormatter",
    "SameLineStreamHandler",
    "get_logger",
]
