"""Custom exception hierarchy for carloan-store."""


class CarLoanStoreError(Exception):
    """Base exception for all carloan-store errors."""


class StorageError(CarLoanStoreError):
    """Raised when the data directory cannot be prepared."""


class MalformedRecordError(CarLoanStoreError):
    """Raised when a stored line cannot be decoded into a record."""


class ConfigurationError(CarLoanStoreError):
    """Raised when configuration is invalid or missing."""
