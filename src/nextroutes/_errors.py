"""nextroutes error hierarchy.

All nextroutes-specific errors inherit from NextRoutesError for easy catching.
"""


class NextRoutesError(Exception):
    """Base error for all nextroutes operations."""


class ConfigError(NextRoutesError):
    """Invalid or missing configuration."""


class GenerateError(NextRoutesError):
    """The declaration file could not be read or written."""
