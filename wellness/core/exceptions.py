"""
Exception types raised by the wellness services.
"""


class WellnessError(Exception):
    """Base class for wellness tracker errors."""


class ValidationError(WellnessError):
    """Raised when user input is rejected at the input boundary."""


class MigrationError(WellnessError):
    """Raised when legacy preference data cannot be migrated."""
