"""
Domain exceptions raised by services and rendered by the API error handler.

Every error carries the HTTP status it maps to, so routes never translate
service failures by hand.
"""

from typing import Any


class StorefrontError(Exception):
    """Base exception for all application errors."""

    status_code: int = 400

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class DuplicateResourceError(StorefrontError):
    """A resource with the same unique attributes already exists."""

    status_code = 409


class DuplicateIdentityError(DuplicateResourceError):
    """Registration attempted with an email that is already taken."""

    def __init__(self, email: str):
        super().__init__(
            f"User with email '{email}' already exists.",
            details={"email": email},
        )


class InvalidCredentialsError(StorefrontError):
    """Login failed. Deliberately does not say whether the email exists."""

    status_code = 401

    def __init__(self) -> None:
        super().__init__("Invalid email or password.")


class ResourceNotFoundError(StorefrontError):
    """Lookup by some field found nothing, e.g. Category with category_id 7."""

    status_code = 404

    def __init__(self, resource: str, field: str, value: Any):
        super().__init__(
            f"{resource} not found with {field}: {value}",
            details={"resource": resource, "field": field, "value": value},
        )
        self.resource = resource
        self.field = field
        self.value = value


class InvalidSortFieldError(StorefrontError):
    """sortBy is not in the listing's allow-list."""

    status_code = 400

    def __init__(self, field: str, allowed: list[str]):
        super().__init__(
            f"Cannot sort by '{field}'. Allowed fields: {', '.join(allowed)}.",
            details={"field": field, "allowed": allowed},
        )


class InvalidSortOrderError(StorefrontError):
    """sortOrder is neither asc nor desc."""

    status_code = 400

    def __init__(self, sort_order: str):
        super().__init__(
            f"sortOrder must be 'asc' or 'desc', got '{sort_order}'.",
            details={"sort_order": sort_order, "allowed": ["asc", "desc"]},
        )


class OrderError(StorefrontError):
    """Order cannot be placed (empty basket, not enough stock)."""

    status_code = 400


class TokenError(StorefrontError):
    """Bearer token rejected."""

    status_code = 401


class ExpiredTokenError(TokenError):
    def __init__(self) -> None:
        super().__init__("Token has expired.")


class InvalidSignatureError(TokenError):
    def __init__(self, reason: str = "Invalid token.") -> None:
        super().__init__(reason)
