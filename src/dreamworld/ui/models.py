"""Data models for the client-side gallery."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum


class GalleryStatus(str, Enum):
    """Lifecycle of a gallery card.  Failed cards are removed, not stored."""

    LOADING = "loading"
    COMPLETE = "complete"


def new_entry_id() -> str:
    """Return a collision-resistant id for a new submission.

    Two submissions in the same clock tick must never share an id, so this is
    a random UUID rather than a timestamp.
    """
    return uuid.uuid4().hex


@dataclass(frozen=True)
class GalleryEntry:
    """One card in the gallery.

    Attributes:
        id: Unique per submission.
        status: ``LOADING`` until the request succeeds.
        url: Image URL, set on completion.
        prompt: Generated description, set on completion.
    """

    id: str
    status: GalleryStatus = GalleryStatus.LOADING
    url: str | None = None
    prompt: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.status is GalleryStatus.LOADING


@dataclass(frozen=True)
class GalleryState:
    """Ordered collection of gallery entries keyed by id, newest first.

    Instances are never mutated; the transition functions in
    :mod:`dreamworld.ui.state` return new states.
    """

    entries: dict[str, GalleryEntry] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self.entries

    def get(self, entry_id: str) -> GalleryEntry | None:
        return self.entries.get(entry_id)

    def ids(self) -> list[str]:
        """Entry ids in display order (newest first)."""
        return list(self.entries)

    def as_list(self) -> list[GalleryEntry]:
        """Entries in display order (newest first)."""
        return list(self.entries.values())

    @property
    def loading_count(self) -> int:
        return sum(1 for entry in self.entries.values() if entry.is_loading)

    def __repr__(self) -> str:
        return f"GalleryState(entries={len(self.entries)}, loading={self.loading_count})"
