"""Web Inspector - check a web page against best-practice rules."""

__version__ = "0.1.0"
