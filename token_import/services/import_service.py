"""Import service - runs the token pipeline and assembles an import preview."""

from __future__ import annotations

import uuid

import structlog

from token_import.codec.base import TokenCodec
from token_import.codec.registry import CashuCodec
from token_import.core.config import Settings, get_settings
from token_import.core.errors import TokenImportError
from token_import.persistence.mint_registry import MintRegistry
from token_import.persistence.proof_store import ProofStore, WalletProofNormalizer
from token_import.pipeline.token_core import decode, extract_proofs, resolve_endpoint, resolve_unit
from token_import.schemas.v1.imports import TokenImportResult
from token_import.utils.amounts import format_amount, total_amount
from token_import.utils.clock import utc_now

logger = structlog.get_logger(__name__)


class TokenImportService:
    """Service for previewing token imports before proofs are stored."""

    def __init__(
        self,
        registry: MintRegistry,
        codec: TokenCodec | None = None,
        proof_store: ProofStore | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.registry = registry
        self.codec = codec or CashuCodec(self.settings.codec)
        self.proof_store = proof_store or WalletProofNormalizer()

    def preview(
        self,
        encoded_token: str | None,
        show_balance: bool = False,
    ) -> TokenImportResult | None:
        """Decode a token and resolve everything needed to store it.

        Returns None when there is nothing to import. Decode and proof
        failures are logged and re-raised.
        """
        import_id = str(uuid.uuid4())
        structlog.contextvars.bind_contextvars(import_id=import_id)
        try:
            try:
                envelope = decode(encoded_token, self.codec)
                if envelope is None:
                    logger.info("token_import.empty_input")
                    return None
                proofs = extract_proofs(envelope, self.proof_store)
            except TokenImportError as exc:
                logger.warning(
                    "token_import.rejected",
                    error_code=exc.code,
                    error=exc.message,
                    details=exc.details,
                )
                raise

            snapshot = self.registry.snapshot()
            unit = resolve_unit(envelope, snapshot)
            amount = total_amount(proofs)
            result = TokenImportResult(
                import_id=import_id,
                endpoint=resolve_endpoint(envelope),
                unit=unit,
                memo=envelope.memo,
                proofs=proofs,
                proof_count=len(proofs),
                total_amount=amount,
                keyset_ids=list(dict.fromkeys(proof.id for proof in proofs)),
                formatted_amount=format_amount(
                    amount,
                    unit,
                    hide_balance=self.settings.display.hide_balance,
                    show_balance=show_balance,
                ),
                decoded_at=utc_now(),
            )
            logger.info(
                "token_import.decoded",
                endpoint=result.endpoint,
                unit=result.unit,
                proof_count=result.proof_count,
                unit_from_registry=envelope.unit is None,
            )
            return result
        finally:
            structlog.contextvars.unbind_contextvars("import_id")
