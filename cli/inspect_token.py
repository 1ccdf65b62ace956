"""Inspect an encoded token and print the import preview as JSON."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from token_import.core.errors import InvalidRegistryError, TokenImportError, to_api_error
from token_import.core.logging import setup_logging
from token_import.persistence.mint_registry import MintRegistry
from token_import.schemas.v1.mints import MintEntry
from token_import.services.import_service import TokenImportService

_MINT_LIST = TypeAdapter(list[MintEntry])


def load_registry(path: Path | None) -> MintRegistry:
    """Load registry entries from a JSON list of ``{url, keysets}`` objects."""
    if path is None:
        return MintRegistry()
    try:
        return MintRegistry(_MINT_LIST.validate_json(path.read_bytes()))
    except OSError as exc:
        raise InvalidRegistryError(
            "Mints file could not be read",
            details={"path": str(path), "reason": type(exc).__name__},
        ) from exc
    except PydanticValidationError as exc:
        raise InvalidRegistryError(
            "Mints file is not a valid list of mints",
            details={"path": str(path), "errors": exc.error_count()},
        ) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decode a cashu token and resolve its metadata.")
    parser.add_argument(
        "token",
        nargs="?",
        default="-",
        help="Encoded token, or '-' to read from stdin (default)",
    )
    parser.add_argument("--mints", type=Path, default=None, help="JSON file with known mints")
    parser.add_argument(
        "--include-proofs",
        action="store_true",
        help="Include the normalized proofs in the output",
    )
    parser.add_argument(
        "--show-balance",
        action="store_true",
        help="Show the amount even when DISPLAY_HIDE_BALANCE is set",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        registry = load_registry(args.mints)
        encoded = sys.stdin.read().strip() if args.token == "-" else args.token
        result = TokenImportService(registry=registry).preview(
            encoded, show_balance=args.show_balance
        )
    except TokenImportError as exc:
        print(to_api_error(exc).model_dump_json(), file=sys.stderr)
        return 1

    if result is None:
        print(json.dumps(None))
        return 0

    exclude = None if args.include_proofs else {"proofs"}
    print(result.model_dump_json(exclude=exclude, indent=2))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
