"""Custom exceptions for GearGuard.

Provides a hierarchy of exceptions for different error types.
All GearGuard exceptions inherit from GearGuardException.

A blocked transaction is never an exception: it is a normal assessment
with allow_transaction=False. Exceptions mean the assessment itself could
not be completed.
"""

from typing import Any, Dict, Optional


class GearGuardException(Exception):
    """Base exception for all GearGuard errors.
    
    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Additional context about the error
    """
    
    def __init__(
        self,
        message: str,
        code: str = "GEARGUARD_ERROR",
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


class ConfigurationError(GearGuardException):
    """Raised when configuration is invalid or missing."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFIG_ERROR", details=details)


class ValidationError(GearGuardException):
    """Raised when input validation fails."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class NotFoundError(GearGuardException):
    """Raised when a referenced user or listing does not exist.
    
    Always propagated: no meaningful assessment is possible without it.
    """
    
    def __init__(
        self,
        message: str,
        resource: str,
        resource_id: str,
        details: Optional[Dict[str, Any]] = None
    ):
        details = details or {}
        details["resource"] = resource
        details["resource_id"] = resource_id
        super().__init__(message, code="NOT_FOUND", details=details)


class TransientError(GearGuardException):
    """Raised when a store, cache, audit sink or timeout fails.
    
    The calling use-case decides between fail-open and fail-closed.
    """
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="TRANSIENT_ERROR", details=details)


class EnrichmentFailure(GearGuardException):
    """Raised by best-effort lookups such as VPN or IP reputation checks.
    
    Analyzers degrade gracefully: the failure is logged and the
    corresponding signal is omitted.
    """
    
    def __init__(
        self,
        message: str,
        provider: str,
        details: Optional[Dict[str, Any]] = None
    ):
        details = details or {}
        details["provider"] = provider
        super().__init__(message, code="ENRICHMENT_FAILURE", details=details)
