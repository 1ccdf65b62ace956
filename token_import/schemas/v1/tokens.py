"""Token schemas: raw proofs, the decoded envelope and the V3 wire shape."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DleqProof(BaseModel):
    model_config = ConfigDict(frozen=True)

    e: str
    s: str
    r: str | None = None


class RawProof(BaseModel):
    """Proof record as carried by the wire format."""

    model_config = ConfigDict(frozen=True)

    id: str
    amount: int = Field(ge=0)
    secret: str
    C: str
    witness: str | dict[str, Any] | None = None
    dleq: DleqProof | None = None


class TokenEnvelope(BaseModel):
    """Decoded token, prior to proof normalization.

    ``unit`` and ``memo`` use ``None`` for absent; an empty string is a
    present value.
    """

    model_config = ConfigDict(frozen=True)

    endpoint: str
    proofs: tuple[tuple[RawProof, ...], ...] = ()
    unit: str | None = None
    memo: str | None = None

    @property
    def flat_proofs(self) -> tuple[RawProof, ...]:
        return tuple(proof for group in self.proofs for proof in group)


class TokenV3Entry(BaseModel):
    mint: str = Field(min_length=1)
    proofs: list[RawProof]


class TokenV3(BaseModel):
    token: list[TokenV3Entry] = Field(min_length=1)
    unit: str | None = None
    memo: str | None = None


class TokenV4Dleq(BaseModel):
    e: bytes
    s: bytes
    r: bytes | None = None


class TokenV4Proof(BaseModel):
    a: int = Field(ge=0)
    s: str
    c: bytes
    d: TokenV4Dleq | None = None
    w: str | None = None


class TokenV4Entry(BaseModel):
    i: bytes
    p: list[TokenV4Proof]


class TokenV4(BaseModel):
    """CBOR map of a ``cashuB`` token; single-letter keys as on the wire."""

    m: str = Field(min_length=1)
    u: str | None = None
    d: str | None = None
    t: list[TokenV4Entry] = Field(min_length=1)
