"""
-------------------------------------------------------------------------
System: GestAJ (Gestion des dossiers d'aide juridique)
Client: Service de la protection fonctionnelle
Description: Custom exceptions for GestAJ. These provide specific error
             codes and HTTP statuses for the statistics endpoints.
-------------------------------------------------------------------------
"""
from typing import Optional


class GestAJException(Exception):
    """Base exception for all GestAJ specific errors."""

    error_code: str = "ERR_GESTAJ_GENERIC"
    default_message: str = "An error occurred in the GestAJ system."
    http_status: int = 500

    def __init__(self, message: Optional[str] = None, details: Optional[dict] = None) -> None:
        """
        Initialize GestAJ exception.

        Args:
            message: Custom error message. If None, uses default_message.
            details: Additional context dictionary for debugging.
        """
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        """Convert exception to dictionary for API responses."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


# Validation Exceptions (client errors)
class InvalidYear(GestAJException):
    """Raised when the requested year is not a number or out of range."""

    error_code = "ERR_INVALID_YEAR"
    default_message = "The requested year is invalid or outside the allowed range."
    http_status = 400


class InvalidDimension(GestAJException):
    """Raised when an unknown grouping dimension or record source is requested."""

    error_code = "ERR_INVALID_DIMENSION"
    default_message = "The requested grouping dimension is not supported."
    http_status = 400


class InvalidRecord(GestAJException):
    """Raised when a record cannot be aggregated into the requested report."""

    error_code = "ERR_INVALID_RECORD"
    default_message = "A financial record could not be aggregated."
    http_status = 400


class InvalidAmount(InvalidRecord):
    """Raised when an amount is non-numeric or negative."""

    error_code = "ERR_INVALID_AMOUNT"
    default_message = "A financial amount is not a valid non-negative number."


# Infrastructure Exceptions (server errors)
class UpstreamFetchFailure(GestAJException):
    """Raised when the record store or the budget store cannot be read."""

    error_code = "ERR_UPSTREAM_FETCH"
    default_message = "Financial records could not be retrieved."
    http_status = 500
