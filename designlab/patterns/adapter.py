"""Adapter that lets a German logger stand in for the standard language."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from designlab.patterns.logger import LogLevel, Logger


class Language(ABC):
    """Target interface expected by clients."""

    @abstractmethod
    def write(self) -> Optional[str]:
        """Write the language's log line."""

    @abstractmethod
    def standard_timings(self) -> Optional[str]:
        """Convert timings into the standard time zone."""


class English(Language):
    """The standard language."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger = logger if logger is not None else Logger()

    def write(self) -> Optional[str]:
        return self.logger.log(LogLevel.DEBUG1, " I am English, Standard language logs.\n")

    def standard_timings(self) -> Optional[str]:
        return self.logger.log(LogLevel.DEBUG1, "convert to standard time zone\n")


class German:
    """An incompatible class with the same operations."""

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger = logger if logger is not None else Logger()

    def write(self) -> Optional[str]:
        return self.logger.log(LogLevel.DEBUG1, "Uses German language for the logs.\n")

    def standard_timings(self) -> Optional[str]:
        return self.logger.log(LogLevel.DEBUG2, "Converted to German timings\n")


class LanguageAdapter(English):
    """Presents a German instance through the standard language interface."""

    def __init__(self, german: German) -> None:
        super().__init__(german.logger)
        self.german = german

    def write(self) -> Optional[str]:
        return self.german.write()

    def standard_timings(self) -> Optional[str]:
        return self.german.standard_timings()


def convert_logs(language: Language) -> List[Optional[str]]:
    """Run both operations of ``language`` and return what each logged."""
    return [language.write(), language.standard_timings()]


def main(argv: Optional[list] = None) -> int:
    logger = Logger(LogLevel.DEBUG2)
    english = English(logger)
    english.write()
    english.standard_timings()

    german = German(logger)
    german.write()
    german.standard_timings()

    logger.log(LogLevel.DEBUG1, "want the english language from German")
    convert_logs(LanguageAdapter(german))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())