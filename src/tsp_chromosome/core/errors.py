"""Exceptions raised by the chromosome core."""


class InvalidConfigurationError(ValueError):
    """Raised when a tour is too small for the requested operation."""
