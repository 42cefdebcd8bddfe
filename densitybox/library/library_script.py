# Standard library imports
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


class SameLineStreamHandler(logging.StreamHandler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)

            if msg.startswith("\r"):  # [SAMELINE]
                self.stream.write(msg)
            else:
                self.stream.write(msg + self.terminator)
            self.flush()

        except Exception:
            self.handleError(record)


class CustomFormatter(logging.Formatter):
    COLOR_TAGS = {
        "RED": "\033[31m",
        "GREEN": "\033[92m",
        "YELLOW": "\033[33m",
        "BLUE": "\033[34m",
        "MAGENTA": "\033[35m",
        "CYAN": "\033[36m",
        "GREY": "\033[90m",
    }

    RESET = "\033[0m"

    FORMATS = {
        logging.DEBUG: "\033[92m" + "%(levelname)s (%(filename)s): %(message)s" + RESET,
        logging.INFO: "%(message)s",  # color will come from [TAG]
        logging.WARNING: "\033[93m" + "%(levelname)s: %(message)s" + RESET,
        logging.ERROR: "\033[91m" + "%(levelname)s: %(message)s" + RESET,
        logging.CRITICAL: "\033[30m\033[103m" + "%(levelname)s: %(message)s" + RESET,
    }

    def format(self, record: logging.LogRecord) -> str:
        sameline = False
        message = record.getMessage()
        if "[SAMELINE]" in message:
            sameline = True
            message = message.replace("[SAMELINE]", "")
        for tag, color_code in self.COLOR_TAGS.items():
            message = message.replace(f"[{tag}]", color_code)
        if message != record.getMessage():
            message += self.RESET

        # format a copy so the file handler still sees the untouched message
        record = logging.makeLogRecord(record.__dict__)
        record.msg, record.args = message, None

        log_fmt = self.FORMATS.get(record.levelno, self._fmt)
        result = logging.Formatter(log_fmt, self.datefmt).format(record)
        return "\r" + result if sameline else result


class PlainFormatter(logging.Formatter):
    """Formatter for log files: strips the color tags used on the console."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        for tag in ["SAMELINE", *CustomFormatter.COLOR_TAGS]:
            message = message.replace(f"[{tag}]", "")
        record = logging.makeLogRecord(record.__dict__)
        record.msg, record.args = message, None
        return super().format(record)


class Logger(logging.getLoggerClass()):
    """
    Logger with a colored console handler and an optional rotating log file.

    Messages may contain color tags such as ``[BLUE]`` or ``[GREEN]``; they
    are rendered as ANSI colors on the console and removed in the log file.

    Args:
        level_file (int, optional): The log level for the file handler.
            Defaults to logging.DEBUG.
        level_console (int, optional): The log level for the console handler.
            Defaults to logging.INFO.
        filename (Path | str, optional): The log file. An empty string
            disables file logging. Defaults to "".
        name (str, optional): The logger name. Defaults to "densitybox".
    """

    DEBUG: int = logging.DEBUG
    INFO: int = logging.INFO
    WARNING: int = logging.WARNING
    ERROR: int = logging.ERROR
    CRITICAL: int = logging.CRITICAL

    def __init__(
        self,
        level_file: int = logging.DEBUG,
        level_console: int = logging.INFO,
        filename: Path | str = "",
        name: str = "densitybox",
    ) -> None:
        super().__init__(name=name, level=logging.DEBUG)
        self.filename = filename
        self.setup_logger(
            level_file=level_file,
            level_console=level_console,
            filename=filename,
        )

    def setup_logger(
        self,
        level_file: int = logging.DEBUG,
        level_console: int = logging.INFO,
        filename: Path | str = "",
    ) -> None:
        self.setLevel(level=min(level_file, level_console))
        if filename:
            log_folder = os.path.dirname(filename)
            if log_folder and not os.path.exists(log_folder):
                os.makedirs(log_folder)
            log_formatter = PlainFormatter(
                fmt="%(asctime)s | %(levelname)-8s | %(filename)-20s | line %(lineno)-4d | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
            max_log_size = 5 * 1024 * 1024
            backup_count = 3
            file_handler = RotatingFileHandler(
                filename=filename,
                maxBytes=max_log_size,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(fmt=log_formatter)
            file_handler.setLevel(level=level_file)
            self.addHandler(hdlr=file_handler)

        # Define a Handler for console output
        console = SameLineStreamHandler(stream=sys.stdout)
        console.setFormatter(fmt=CustomFormatter())
        console.setLevel(level=level_console)
        self.addHandler(hdlr=console)

    def close(self) -> None:
        """Flush and detach all handlers (releases the log file)."""
        for handler in list(self.handlers):
            handler.close()
            self.removeHandler(handler)


def get_logger(logger: logging.Logger | None = None) -> logging.Logger:
    """Return the given logger or the package logger without handlers of its own."""
    if logger is not None:
        return logger
    return logging.getLogger("densitybox")
