"""Markdown event types, link-label scanning, spec-case reading and parse-time linearity checks."""

__version__ = "0.1.0"