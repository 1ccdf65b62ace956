"""Registry of known mints and their keysets."""

from __future__ import annotations

from dataclasses import dataclass

from token_import.schemas.v1.mints import MintEntry, MintKeyset


@dataclass(frozen=True)
class MintRegistrySnapshot:
    """Immutable, ordered view of the registry at one point in time."""

    mints: tuple[MintEntry, ...] = ()

    def entries_for(self, url: str) -> list[MintEntry]:
        """All entries whose URL matches exactly, in registry order."""
        return [mint for mint in self.mints if mint.url == url]

    def keysets_for(self, url: str) -> list[MintKeyset]:
        """Keysets of every matching entry, entry order then keyset order."""
        return [keyset for mint in self.entries_for(url) for keyset in mint.keysets]


class MintRegistry:
    """Insertion-ordered registry of mints.

    Duplicate URLs are kept as separate entries; lookups see them in the
    order they were added.
    """

    def __init__(self, mints: list[MintEntry] | None = None) -> None:
        self._mints: list[MintEntry] = list(mints or [])

    def add(self, mint: MintEntry) -> None:
        self._mints.append(mint)

    def get(self, url: str) -> MintEntry:
        """Get the first entry for a URL. Raises KeyError if not found."""
        for mint in self._mints:
            if mint.url == url:
                return mint
        raise KeyError(f"Unknown mint: {url}")

    def has(self, url: str) -> bool:
        return any(mint.url == url for mint in self._mints)

    @property
    def urls(self) -> list[str]:
        """Distinct mint URLs in insertion order."""
        return list(dict.fromkeys(mint.url for mint in self._mints))

    def snapshot(self) -> MintRegistrySnapshot:
        return MintRegistrySnapshot(mints=tuple(self._mints))
