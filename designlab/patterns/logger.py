"""Level-filtered logger that writes one formatted record per call."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import Optional, TextIO


class LogLevel(IntEnum):
    """Severity levels, from most to least important."""

    ERROR = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3
    DEBUG1 = 4
    DEBUG2 = 5
    DEBUG3 = 6
    DEBUG4 = 7


def format_record(level: LogLevel, message: str) -> str:
    """Return the record line for ``message``: numeric level, colon, indent, text.

    Levels deeper than DEBUG are indented by four spaces per extra level;
    all other levels get a single space.
    """
    level = LogLevel(level)
    width = (level - LogLevel.DEBUG) * 4 if level > LogLevel.DEBUG else 1
    return f"{int(level)} :{' ' * width}{message}"


class Logger:
    """Writes records whose level does not exceed the threshold."""

    def __init__(
        self,
        threshold: LogLevel = LogLevel.DEBUG2,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.threshold = LogLevel(threshold)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def enabled(self, level: LogLevel) -> bool:
        """Whether a record at ``level`` would be written."""
        return LogLevel(level) <= self.threshold

    def log(self, level: LogLevel, *args: object) -> Optional[str]:
        """Write the concatenated ``args`` at ``level``.

        Returns the written record (without the line end), or None when the
        level is filtered out.
        """
        if not self.enabled(level):
            return None
        record = format_record(level, "".join(str(arg) for arg in args))
        stream = self.stream
        stream.write(record + "\n")
        stream.flush()
        return record


def run_demo(logger: Logger) -> None:
    """Emit the sample records at several levels."""
    logger.log(LogLevel.INFO, "foo ", "bar ", "baz")
    count = 3
    logger.log(LogLevel.DEBUG, "A loop with ", count, " iterations")
    for i in range(count):
        logger.log(LogLevel.DEBUG1, "the counter i = ", i)
        logger.log(LogLevel.DEBUG2, "the counter i = ", i)


def main(argv: Optional[list] = None) -> int:
    run_demo(Logger(LogLevel.DEBUG2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())