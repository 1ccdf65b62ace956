"""Base codec interface for encoded tokens."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from token_import.schemas.v1.tokens import TokenEnvelope


class TokenCodec(ABC):
    """Abstract base class for wire-format codecs.

    Contract:
    - MUST return a fully populated envelope or raise
    - MUST raise MalformedTokenError for input it cannot parse
    - MUST NOT perform network calls or signature checks
    """

    @property
    @abstractmethod
    def version(self) -> str:
        """Version letter following the ``cashu`` prefix."""
        ...

    @abstractmethod
    def decode(self, encoded_token: str) -> TokenEnvelope:
        """Decode a non-empty encoded token."""
        ...

    @abstractmethod
    def encode(self, envelope: TokenEnvelope) -> str:
        """Encode an envelope back to its wire string."""
        ...
