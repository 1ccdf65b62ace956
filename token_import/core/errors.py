"""Token import error hierarchy."""

from typing import Any

from token_import.schemas.v1.common import ApiError


class TokenImportError(Exception):
    """Base exception for token import errors."""

    code = "TOKEN_IMPORT_INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.details = details
        super().__init__(message)


class MalformedTokenError(TokenImportError):
    """Encoded token is non-empty but cannot be decoded into an envelope."""

    code = "TOKEN_IMPORT_MALFORMED_TOKEN"


class EmptyOrMissingProofsError(TokenImportError):
    """Decoded token is absent or carries zero usable proofs.

    Raised as a hard precondition failure. An import with zero proofs
    never succeeds with an empty result.
    """

    code = "TOKEN_IMPORT_EMPTY_OR_MISSING_PROOFS"


class InvalidRegistryError(TokenImportError):
    """Known-mints input cannot be read or does not match the registry schema."""

    code = "TOKEN_IMPORT_INVALID_REGISTRY"


def to_api_error(error: TokenImportError) -> ApiError:
    """Render an error as the public error payload."""
    return ApiError(code=error.code, message=error.message, details=error.details)
