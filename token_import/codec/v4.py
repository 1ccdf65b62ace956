"""V4 (``cashuB``) token codec.

The payload is base64url-encoded CBOR::

    {"m": "<mint url>", "u": "sat", "d": "<memo>",
     "t": [{"i": <keyset id bytes>, "p": [{"a": 1, "s": "...", "c": <bytes>}]}]}

Each ``t`` entry becomes one proof group. Keyset ids and signatures are
carried as bytes on the wire and as hex strings in the envelope.
"""

from __future__ import annotations

import json
from typing import Any

import cbor2

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
from token_import.schemas.v1.tokens import (
    DleqProof,
    RawProof,
    TokenEnvelope,
    TokenV4,
    TokenV4Proof,
)


def _to_raw_proof(keyset_id: bytes, proof: TokenV4Proof) -> RawProof:
    dleq = None
    if proof.d is not None:
        dleq = DleqProof(
            e=proof.d.e.hex(),
            s=proof.d.s.hex(),
            r=proof.d.r.hex() if proof.d.r is not None else None,
        )
    return RawProof(
        id=keyset_id.hex(),
        amount=proof.a,
        secret=proof.s,
        C=proof.c.hex(),
        witness=proof.w,
        dleq=dleq,
    )


def _to_wire_proof(proof: RawProof) -> dict[str, Any]:
    wire: dict[str, Any] = {"a": proof.amount, "s": proof.secret, "c": bytes.fromhex(proof.C)}
    if proof.dleq is not None:
        dleq = {"e": bytes.fromhex(proof.dleq.e), "s": bytes.fromhex(proof.dleq.s)}
        if proof.dleq.r is not None:
            dleq["r"] = bytes.fromhex(proof.dleq.r)
        wire["d"] = dleq
    if proof.witness is not None:
        # V4 carries witnesses as strings only
        wire["w"] = proof.witness if isinstance(proof.witness, str) else json.dumps(proof.witness)
    return wire


class CashuV4Codec(TokenCodec):
    """Codec for ``cashuB`` tokens."""

    def __init__(self, config: CodecConfig | None = None) -> None:
        self._config = config or get_settings().codec

    @property
    def version(self) -> str:
        return TokenVersion.V4.value

    def decode(self, encoded_token: str) -> TokenEnvelope:
        version, payload = split_token(encoded_token, self._config)
        require_version(version, self.version)

        try:
            wire = TokenV4.model_validate(cbor2.loads(b64url_decode(payload)))
        except (cbor2.CBORDecodeError, ValueError) as exc:
            raise MalformedTokenError(
                "Token payload could not be parsed",
                details={"reason": type(exc).__name__},
            ) from exc

        return TokenEnvelope(
            endpoint=wire.m,
            proofs=tuple(
                tuple(_to_raw_proof(entry.i, proof) for proof in entry.p) for entry in wire.t
            ),
            unit=wire.u,
            memo=wire.d,
        )

    def encode(self, envelope: TokenEnvelope) -> str:
        if not envelope.endpoint:
            raise MalformedTokenError("Envelope cannot be encoded", details={"reason": "endpoint"})

        entries: list[dict[str, Any]] = []
        try:
            for group in envelope.proofs:
                # one entry per run of proofs sharing a keyset id
                last_id: str | None = None
                for proof in group:
                    if proof.id != last_id:
                        entries.append({"i": bytes.fromhex(proof.id), "p": []})
                        last_id = proof.id
                    entries[-1]["p"].append(_to_wire_proof(proof))
        except ValueError as exc:
            raise MalformedTokenError(
                "Envelope cannot be encoded",
                details={"reason": "non-hex keyset id or signature"},
            ) from exc
        if not entries:
            raise MalformedTokenError("Envelope cannot be encoded", details={"reason": "no proofs"})

        wire: dict[str, Any] = {"m": envelope.endpoint}
        if envelope.unit is not None:
            wire["u"] = envelope.unit
        if envelope.memo is not None:
            wire["d"] = envelope.memo
        wire["t"] = entries
        return f"{TOKEN_PREFIX}{self.version}{b64url_encode(cbor2.dumps(wire))}"
