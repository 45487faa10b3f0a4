# services/fuel-service/src/apps/core/services/exceptions.py
"""
Fuel Service Exceptions

Custom exceptions for fuel service operations.
"""

import functools
import logging
from typing import Optional, Dict, Any

from django.db import DatabaseError

logger = logging.getLogger(__name__)


class FuelServiceError(Exception):
    """Base exception for fuel service errors."""

    def __init__(
        self,
        message: str,
        code: str = "FUEL_SERVICE_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class DocumentNotFoundError(FuelServiceError):
    """Raised when a document or storage facility does not exist."""

    def __init__(
        self,
        document_type: str,
        document_id: Any = None,
        message: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        msg = message or f"{document_type} not found: {document_id}"
        error_details = details or {}
        error_details.update({
            "document_type": document_type,
            "document_id": str(document_id) if document_id is not None else None,
        })
        super().__init__(
            message=msg,
            code="DOCUMENT_NOT_FOUND",
            details=error_details
        )


class DocumentStateError(FuelServiceError):
    """Raised when a transition is not allowed from the current status."""

    def __init__(
        self,
        current_state: str,
        target_state: str,
        message: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        msg = message or f"Cannot transition from {current_state} to {target_state}"
        error_details = details or {}
        error_details.update({
            "current_state": current_state,
            "target_state": target_state
        })
        super().__init__(
            message=msg,
            code="DOCUMENT_STATE_ERROR",
            details=error_details
        )


class FuelValidationError(FuelServiceError):
    """Raised when input data for an operation is invalid."""

    def __init__(
        self,
        message: str,
        field: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        error_details = details or {}
        if field:
            error_details["field"] = field
        super().__init__(
            message=message,
            code="FUEL_VALIDATION_ERROR",
            details=error_details
        )


class StoreError(FuelServiceError):
    """Raised when the database fails underneath an operation."""

    def __init__(
        self,
        operation: str,
        message: str = None,
        details: Optional[Dict[str, Any]] = None
    ):
        msg = message or f"Store failure during {operation}"
        error_details = details or {}
        error_details["operation"] = operation
        super().__init__(
            message=msg,
            code="STORE_ERROR",
            details=error_details
        )


def store_operation(func):
    """
    Wrap database failures raised by a service operation in StoreError.

    The original DatabaseError is kept as __cause__. Apply it outside
    transaction.atomic so the failed transaction is rolled back first.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DatabaseError as e:
            logger.error(
                f"Store failure in {func.__qualname__}: {e}",
                extra={'operation': func.__qualname__}
            )
            raise StoreError(operation=func.__qualname__, message=str(e) or None) from e

    return wrapper
