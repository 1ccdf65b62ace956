"""Import preview schema."""

from datetime import datetime

from pydantic import BaseModel, Field

from token_import.schemas.v1.proofs import WalletProof


class TokenImportResult(BaseModel):
    import_id: str
    endpoint: str
    unit: str
    memo: str | None = None
    proofs: list[WalletProof] = Field(default_factory=list)
    proof_count: int
    total_amount: int
    keyset_ids: list[str] = Field(default_factory=list)
    formatted_amount: str
    decoded_at: datetime
