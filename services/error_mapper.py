# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.exceptions import (
    StoreError, NetworkError, OrphanedBlobError, ValidationError
)
from utils.logger import get_logger

logger = get_logger(__name__)


# Fallback banner text when an error carries no message of its own
_CONTEXT_FALLBACKS = {
    "load": "Failed to load data",
    "save": "Failed to save document",
    "upload": "Failed to upload document",
    "delete": "Failed to delete record",
    "update": "Failed to update record",
    "transaction": "Failed to save transaction",
    "export": "Failed to export document",
}


def _fallback(context: str = None) -> str:
    return _CONTEXT_FALLBACKS.get(context or "", "Something went wrong")


def map_store_error(error: StoreError, context: str = None) -> str:
    """Map a store rejection to the message shown in the error banner.

    The store's own message is kept; the status code is logged only.
    """
    if error.status_code:
        logger.warning(f"Store error ({error.status_code}): {error.message}")
    details = _extract_details(error.response_data)
    if details:
        return details
    return error.message or _fallback(context)


def map_network_error(error: NetworkError, context: str = None) -> str:
    """Map network exception to user-friendly message."""
    msg = str(error.original_error) if error.original_error else error.message
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return "The request timed out. Please try again."
    return f"{_fallback(context)}: unable to reach the server"


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to a human-readable banner message."""
    if isinstance(error, OrphanedBlobError):
        logger.warning(f"Orphaned blob left in storage: {error.blob_path}")
        return (
            f"The file was uploaded but the document record could not be saved: "
            f"{error.message}"
        )

    if isinstance(error, NetworkError):
        return map_network_error(error, context)

    if isinstance(error, StoreError):
        if not error.context and context:
            error.context = context
        return map_store_error(error, context)

    if isinstance(error, ValidationError):
        if error.errors:
            logger.info(f"Validation error: {error.errors}")
            return "\n".join(error.errors)
        return error.message

    logger.warning(f"Unexpected error: {error}")
    return str(error) or _fallback(context)


def _extract_details(response_data: dict) -> str:
    """Extract the message from a PostgREST/Storage error body."""
    if not response_data:
        return ""

    message = response_data.get("message") or response_data.get("error_description")
    if not message:
        message = response_data.get("error")
    if not isinstance(message, str):
        return ""

    hint = response_data.get("details") or response_data.get("hint")
    if isinstance(hint, str) and hint:
        return f"{message} ({hint})"
    return message
