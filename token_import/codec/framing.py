"""Token string framing shared by every wire version.

An encoded token is ``[uri prefix]cashu<version letter><base64url payload>``.
"""

from __future__ import annotations

import base64

from token_import.core.config import CodecConfig
from token_import.core.errors import MalformedTokenError

TOKEN_PREFIX = "cashu"


def b64url_decode(payload: str) -> bytes:
    """Decode base64url, tolerating the standard alphabet and missing padding."""
    normalized = payload.replace("-", "+").replace("_", "/")
    normalized += "=" * (-len(normalized) % 4)
    return base64.b64decode(normalized, validate=True)


def b64url_encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def strip_uri_prefix(encoded_token: str, config: CodecConfig) -> str:
    token = encoded_token.strip()
    for prefix in config.uri_prefix_list:
        if token.startswith(prefix):
            return token[len(prefix) :]
    return token


def split_token(encoded_token: str, config: CodecConfig) -> tuple[str, str]:
    """Return ``(version, payload)`` of an encoded token."""
    if len(encoded_token) > config.max_token_length:
        raise MalformedTokenError(
            "Token exceeds maximum length",
            details={
                "length": len(encoded_token),
                "max_token_length": config.max_token_length,
            },
        )

    token = strip_uri_prefix(encoded_token, config)
    if not token.startswith(TOKEN_PREFIX) or len(token) <= len(TOKEN_PREFIX):
        raise MalformedTokenError(
            "Token is missing the cashu prefix",
            details={"prefix": token[: len(TOKEN_PREFIX)]},
        )
    return token[len(TOKEN_PREFIX)], token[len(TOKEN_PREFIX) + 1 :]


def require_version(version: str, expected: str) -> None:
    if version != expected:
        raise MalformedTokenError(
            "Unsupported token version",
            details={"version": version},
        )
