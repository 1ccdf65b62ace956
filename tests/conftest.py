"""Root conftest for tests."""

import base64
import json
import os
from typing import Any

import pytest
import structlog

if os.getenv("APP_ENV", "").strip().lower() == "prod":
    raise RuntimeError("Refusing to run tests with APP_ENV=prod")

os.environ["APP_ENV"] = "local"
os.environ.setdefault("OBSERVABILITY_LOG_RECORD_FORMAT", "json")

MINT_URL = "https://mint.example"


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Auto-apply markers based on test directory structure."""
    dir_marker_map = {
        "unit": pytest.mark.unit,
    }
    for item in items:
        test_path = str(item.fspath)
        for dir_name, marker in dir_marker_map.items():
            if f"/{dir_name}/" in test_path or f"\\{dir_name}\\" in test_path:
                item.add_marker(marker)
                break


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Each test sees settings built from the current environment."""
    from token_import.core.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def make_raw_proof(amount: int, keyset_id: str = "009a1f293253e41e", **extra: Any) -> dict:
    return {
        "id": keyset_id,
        "amount": amount,
        "secret": f"secret-{amount}-{keyset_id}",
        "C": "02" + f"{amount:064x}",
        **extra,
    }


def encode_payload(payload: Any, prefix: str = "cashuA") -> str:
    raw = json.dumps(payload).encode("utf-8")
    return prefix + base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


@pytest.fixture
def mint_url() -> str:
    return MINT_URL


@pytest.fixture
def two_group_token() -> str:
    """Token for MINT_URL with two entries of one proof each and no unit."""
    return encode_payload(
        {
            "token": [
                {"mint": MINT_URL, "proofs": [make_raw_proof(4)]},
                {"mint": MINT_URL, "proofs": [make_raw_proof(2)]},
            ]
        }
    )


@pytest.fixture
def sat_registry():
    from token_import.persistence.mint_registry import MintRegistry
    from token_import.schemas.v1.mints import MintEntry, MintKeyset

    return MintRegistry(
        [MintEntry(url=MINT_URL, keysets=(MintKeyset(id="009a1f293253e41e", unit="sat"),))]
    )


@pytest.fixture
def raw_proof():
    """Factory for raw proof dicts as they appear on the wire."""
    return make_raw_proof


@pytest.fixture
def encode_token():
    """Factory that base64url-encodes an arbitrary payload as a token."""
    return encode_payload


@pytest.fixture(autouse=True)
def log_events():
    """Capture structlog events instead of printing them."""
    with structlog.testing.capture_logs() as events:
        yield events
