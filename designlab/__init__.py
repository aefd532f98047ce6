"""Design-pattern examples and small low-level system designs."""

__version__ = "0.1.0"