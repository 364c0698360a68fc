"""
core/errors.py -- Domain error taxonomy for NearbyMarket.

Every failure a caller can observe is one of these exceptions. Each class
carries the HTTP status and the machine-readable code it maps to, so the
single MarketError handler in api/main.py can render all of them without a
lookup table. Stores never raise these -- they return None / False and the
service layer decides what a miss means.

Layer rule: core/ is the kernel. This module may not import from api/,
auth/, or catalog/.
"""

from __future__ import annotations


class MarketError(Exception):
    """Base class for all domain errors surfaced to API clients."""

    status_code: int = 500
    code: str = "internal_error"
    message: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(MarketError):
    """A required field is missing or blank."""

    status_code = 400
    code = "validation_error"
    message = "Missing required fields"


class DuplicateEmail(MarketError):
    status_code = 400
    code = "duplicate_email"
    message = "Email already exists"


class InvalidCredentials(MarketError):
    """Login failed. Deliberately does not say which half was wrong."""

    status_code = 400
    code = "invalid_credentials"
    message = "Invalid email or password"


class InvalidToken(MarketError):
    """Token signature, structure, or expiry check failed."""

    status_code = 401
    code = "invalid_token"
    message = "Invalid token"


class Unauthenticated(MarketError):
    status_code = 401
    code = "unauthenticated"
    message = "Access denied. No token provided"


class InvalidCategory(MarketError):
    """A product referenced a category name that does not exist."""

    status_code = 400
    code = "invalid_category"
    message = "Invalid category"


class NotFound(MarketError):
    status_code = 404
    code = "not_found"
    message = "Not found"


class InternalError(MarketError):
    pass
