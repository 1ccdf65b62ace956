"""V3 (``cashuA``) token codec.

The payload is base64url-encoded JSON::

    {"token": [{"mint": "<url>", "proofs": [...]}], "unit": "sat", "memo": "..."}

Each ``token`` entry becomes one proof group of the envelope.
"""

from __future__ import annotations

import json

from pydantic import ValidationError as PydanticValidationError

from token_import.codec.base import TokenCodec
from token_import.codec.framing import (
    TOKEN_PREFIX,
    b64url_decode,
    b64url_encode,
    require_version,
    split_token,
)
from token_import.core.config import CodecConfig, get_settings
from token_import.core.errors import MalformedTokenError
from token_import.schemas.v1.common import TokenVersion
from token_import.schemas.v1.tokens import TokenEnvelope, TokenV3, TokenV3Entry


class CashuV3Codec(TokenCodec):
    """Codec for ``cashuA`` tokens."""

    def __init__(self, config: CodecConfig | None = None) -> None:
        self._config = config or get_settings().codec

    @property
    def version(self) -> str:
        return TokenVersion.V3.value

    def decode(self, encoded_token: str) -> TokenEnvelope:
        version, payload = split_token(encoded_token, self._config)
        require_version(version, self.version)

        try:
            wire = TokenV3.model_validate_json(b64url_decode(payload))
        except ValueError as exc:
            # covers binascii.Error and pydantic ValidationError
            raise MalformedTokenError(
                "Token payload could not be parsed",
                details={"reason": type(exc).__name__},
            ) from exc

        mints = {entry.mint for entry in wire.token}
        if len(mints) > 1:
            raise MalformedTokenError(
                "Multi-mint tokens are not supported",
                details={"mints": sorted(mints)},
            )

        return TokenEnvelope(
            endpoint=wire.token[0].mint,
            proofs=tuple(tuple(entry.proofs) for entry in wire.token),
            unit=wire.unit,
            memo=wire.memo,
        )

    def encode(self, envelope: TokenEnvelope) -> str:
        groups = envelope.proofs or ((),)
        try:
            wire = TokenV3(
                token=[TokenV3Entry(mint=envelope.endpoint, proofs=list(group)) for group in groups],
                unit=envelope.unit,
                memo=envelope.memo,
            )
        except PydanticValidationError as exc:
            raise MalformedTokenError(
                "Envelope cannot be encoded",
                details={"reason": str(exc)},
            ) from exc
        body = json.dumps(wire.model_dump(mode="json", exclude_none=True), separators=(",", ":"))
        return f"{TOKEN_PREFIX}{self.version}{b64url_encode(body.encode('utf-8'))}"
