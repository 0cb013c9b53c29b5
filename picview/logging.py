"""Logging utilities with timing and frame tracking."""

from __future__ import annotations
import sys
import time
from typing import Optional, TextIO


class Logger:
    """Application logger with timestamps and frame counts."""

    def __init__(self):
        self._start_time: float = time.perf_counter()
        self._frame: int = 0

    @property
    def frame(self) -> int:
        """Current frame number."""
        return self._frame

    def increment_frame(self) -> None:
        self._frame += 1

    @property
    def elapsed(self) -> float:
        """Seconds since logger was created."""
        return time.perf_counter() - self._start_time

    def format(self, msg: str) -> str:
        return f"[{self.elapsed:7.3f}s F{self._frame:06d}] {msg}\n"

    def _write(self, stream: TextIO, line: str) -> bool:
        try:
            stream.write(line)
            stream.flush()
            return True
        except (OSError, ValueError, AttributeError):
            # Closed or missing stream (e.g. pythonw without a console)
            return False

    def log(self, msg: str) -> None:
        """Log a message to stdout, falling back to stderr."""
        line = self.format(msg)
        if not self._write(sys.stdout, line):
            self._write(sys.stderr, line)

    def error(self, msg: str) -> None:
        """Log an error message to stderr."""
        self._write(sys.stderr, self.format(msg))

    def __call__(self, msg: str) -> None:
        self.log(msg)


# Global logger instance
_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def log(msg: str) -> None:
    """Log a message using the global logger."""
    get_logger().log(msg)


def log_error(msg: str) -> None:
    """Log an error using the global logger."""
    get_logger().error(msg)


def get_frame() -> int:
    """Get current frame count."""
    return get_logger().frame


def increment_frame() -> None:
    get_logger().increment_frame()


def now() -> float:
    """Get current time in seconds (high precision)."""
    return time.perf_counter()
