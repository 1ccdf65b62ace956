"""Mint registry schemas."""

from pydantic import BaseModel, ConfigDict, Field


class MintKeyset(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    unit: str
    active: bool = True
    input_fee_ppk: int = Field(default=0, ge=0)


class MintEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    keysets: tuple[MintKeyset, ...] = ()
    nickname: str | None = None
