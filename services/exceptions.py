# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class StoreError(Exception):
    """Exception raised when the hosted data store rejects a call."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class NetworkError(StoreError):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message, context=context)
        self.original_error = original_error


class OrphanedBlobError(StoreError):
    """
    A blob was uploaded but the row referencing it could not be inserted.

    The blob stays in storage; ``blob_path`` names it.
    """

    def __init__(self, message: str, blob_path: str,
                 original_error: Exception = None, context: str = None):
        super().__init__(message, context=context)
        self.blob_path = blob_path
        self.original_error = original_error


class ValidationError(Exception):
    """Exception raised for validation errors."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context


class WizardStateError(Exception):
    """Operation not allowed in the wizard's current state."""
