"""Common schemas: enums and error responses."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel


class TokenVersion(StrEnum):
    V3 = "A"
    V4 = "B"


class CurrencyUnit(StrEnum):
    SAT = "sat"
    MSAT = "msat"
    USD = "usd"
    EUR = "eur"


class ApiError(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None
