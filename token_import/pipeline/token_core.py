"""Token core - PURE functions projecting a decoded token.

This module contains ZERO logging and ZERO network access. Every function is a
read-only projection over an immutable envelope and registry snapshot.
"""

from __future__ import annotations

from token_import.codec.base import TokenCodec
from token_import.codec.registry import CashuCodec
from token_import.core.errors import (
    EmptyOrMissingProofsError,
    MalformedTokenError,
    TokenImportError,
)
from token_import.persistence.mint_registry import MintRegistrySnapshot
from token_import.persistence.proof_store import ProofStore, WalletProofNormalizer
from token_import.schemas.v1.proofs import WalletProof
from token_import.schemas.v1.tokens import TokenEnvelope


def decode(encoded_token: str | None, codec: TokenCodec | None = None) -> TokenEnvelope | None:
    """Decode an encoded token.

    Empty or missing input means there is nothing to import and yields
    ``None``. Any codec failure surfaces as MalformedTokenError.
    """
    if not encoded_token:
        return None
    codec = codec or CashuCodec()
    try:
        return codec.decode(encoded_token)
    except TokenImportError:
        raise
    except Exception as exc:
        raise MalformedTokenError(
            "Token could not be decoded",
            details={"reason": type(exc).__name__},
        ) from exc


def extract_proofs(
    envelope: TokenEnvelope | None,
    proof_store: ProofStore | None = None,
) -> list[WalletProof]:
    """Flatten the proof groups and normalize each proof, preserving order."""
    flat = envelope.flat_proofs if envelope is not None else ()
    if not flat:
        raise EmptyOrMissingProofsError(
            "Token has no proofs",
            details={"decoded": envelope is not None},
        )
    proof_store = proof_store or WalletProofNormalizer()
    return [proof_store.normalize(proof) for proof in flat]


def resolve_endpoint(envelope: TokenEnvelope | None) -> str:
    """Mint URL of the token, verbatim; empty when there is nothing to resolve."""
    if envelope is None or not envelope.proofs:
        return ""
    return envelope.endpoint


def resolve_unit(envelope: TokenEnvelope | None, registry: MintRegistrySnapshot) -> str:
    """Currency unit of the token.

    An explicit unit wins, even when empty. Otherwise the first keyset of the
    first registry entry matching the mint URL decides.
    """
    if envelope is None:
        return ""
    if envelope.unit is not None:
        return envelope.unit

    keysets = registry.keysets_for(resolve_endpoint(envelope))
    if keysets:
        return keysets[0].unit
    return ""


def extract_memo(envelope: TokenEnvelope | None) -> str | None:
    # Returns "" when a memo IS present and None when it is absent. Callers
    # that need the memo text read envelope.memo.
    if envelope is None or envelope.memo is not None:
        return ""
    return None
