"""Unit tests for errors module."""

from token_import.core.errors import (
    EmptyOrMissingProofsError,
    InvalidRegistryError,
    MalformedTokenError,
    TokenImportError,
    to_api_error,
)


def test_token_import_error_base():
    error = TokenImportError("test message")
    assert error.message == "test message"
    assert error.code == "TOKEN_IMPORT_INTERNAL_ERROR"
    assert error.details is None
    assert str(error) == "test message"


def test_malformed_token_error():
    error = MalformedTokenError("bad token")
    assert error.code == "TOKEN_IMPORT_MALFORMED_TOKEN"
    assert isinstance(error, TokenImportError)


def test_empty_or_missing_proofs_error():
    error = EmptyOrMissingProofsError("no proofs")
    assert error.code == "TOKEN_IMPORT_EMPTY_OR_MISSING_PROOFS"
    assert isinstance(error, TokenImportError)


def test_error_variants_are_distinct():
    assert not issubclass(MalformedTokenError, EmptyOrMissingProofsError)
    assert not issubclass(EmptyOrMissingProofsError, MalformedTokenError)


def test_error_with_details():
    error = MalformedTokenError("error", details={"version": "B"})
    assert error.details == {"version": "B"}


def test_to_api_error():
    payload = to_api_error(EmptyOrMissingProofsError("Token has no proofs", {"decoded": True}))
    assert payload.code == "TOKEN_IMPORT_EMPTY_OR_MISSING_PROOFS"
    assert payload.message == "Token has no proofs"
    assert payload.details == {"decoded": True}


def test_invalid_registry_error():
    error = InvalidRegistryError("bad mints", details={"path": "mints.json"})
    assert error.code == "TOKEN_IMPORT_INVALID_REGISTRY"
    assert isinstance(error, TokenImportError)
    assert to_api_error(error).details == {"path": "mints.json"}
