"""Wallet proof schema."""

from typing import Any

from pydantic import BaseModel, Field

from token_import.schemas.v1.tokens import DleqProof


class WalletProof(BaseModel):
    id: str
    amount: int
    secret: str
    C: str
    witness: str | dict[str, Any] | None = None
    dleq: DleqProof | None = None
    reserved: bool = Field(default=False)
    quote: str | None = None
