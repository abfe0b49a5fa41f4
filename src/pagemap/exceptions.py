"""Custom exceptions for pagemap."""


class PagemapError(Exception):
    """Base exception for pagemap."""


class ConfigValidationError(PagemapError):
    """Options file is invalid or malformed."""
