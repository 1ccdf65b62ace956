"""Default codec: dispatches on the token's version letter."""

from __future__ import annotations

from token_import.codec.base import TokenCodec
from token_import.codec.framing import split_token
from token_import.codec.v3 import CashuV3Codec
from token_import.codec.v4 import CashuV4Codec
from token_import.core.config import CodecConfig, get_settings
from token_import.core.errors import MalformedTokenError
from token_import.schemas.v1.common import TokenVersion
from token_import.schemas.v1.tokens import TokenEnvelope


class CashuCodec(TokenCodec):
    """Decodes any supported token version; encodes with ``encode_version``."""

    def __init__(
        self,
        config: CodecConfig | None = None,
        encode_version: str = TokenVersion.V4.value,
    ) -> None:
        self._config = config or get_settings().codec
        self._codecs: dict[str, TokenCodec] = {}
        for codec in (CashuV3Codec(self._config), CashuV4Codec(self._config)):
            self._codecs[codec.version] = codec
        if encode_version not in self._codecs:
            raise ValueError(f"Unknown token version: {encode_version}")
        self._encode_version = encode_version

    @property
    def version(self) -> str:
        return self._encode_version

    @property
    def supported_versions(self) -> list[str]:
        return sorted(self._codecs)

    def decode(self, encoded_token: str) -> TokenEnvelope:
        version, _ = split_token(encoded_token, self._config)
        codec = self._codecs.get(version)
        if codec is None:
            raise MalformedTokenError(
                "Unsupported token version",
                details={"version": version},
            )
        return codec.decode(encoded_token)

    def encode(self, envelope: TokenEnvelope) -> str:
        return self._codecs[self._encode_version].encode(envelope)
