"""Proof store seam: raw proofs to wallet proofs."""

from __future__ import annotations

from abc import ABC, abstractmethod

from token_import.schemas.v1.proofs import WalletProof
from token_import.schemas.v1.tokens import RawProof


class ProofStore(ABC):
    """Normalizes raw proofs into the wallet's internal representation."""

    @abstractmethod
    def normalize(self, raw_proof: RawProof) -> WalletProof:
        """Normalize one raw proof."""
        ...


class WalletProofNormalizer(ProofStore):
    """Default store: copies proof fields and marks proofs as unreserved."""

    def __init__(self, quote: str | None = None) -> None:
        self._quote = quote

    def normalize(self, raw_proof: RawProof) -> WalletProof:
        return WalletProof(
            id=raw_proof.id,
            amount=raw_proof.amount,
            secret=raw_proof.secret,
            C=raw_proof.C,
            witness=raw_proof.witness,
            dleq=raw_proof.dleq,
            reserved=False,
            quote=self._quote,
        )
