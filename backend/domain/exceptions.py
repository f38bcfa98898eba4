"""
Custom exception classes for cosmetic synchronization.

These exceptions provide more specific error handling and better error messages
for the failure scenarios of the store gateway and the repositories.
"""

from typing import Optional


class CosmeticSyncError(Exception):
    """Base class for every failure raised by the synchronization layer."""


class InvalidIdentityError(CosmeticSyncError):
    """Raised when an operation is attempted without a usable player identity."""

    def __init__(self, identity: Optional[str]):
        self.identity = identity
        super().__init__(f"Invalid player identity: {identity!r}")


class StoreUnavailableError(CosmeticSyncError):
    """Raised when a database connection could not be acquired."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Store unavailable: {reason}")


class QueryFailureError(CosmeticSyncError):
    """Raised when a statement fails to execute (including constraint violations)."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Query failed during {operation}: {reason}")


class ConfigurationError(ValueError):
    """Raised when there's an error in configuration parsing or validation."""

    def __init__(self, message: str):
        super().__init__(f"Configuration error: {message}")
