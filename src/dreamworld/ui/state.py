"""Gallery state transitions.

The gallery is a small state machine per submission:

- ``Pending``  - :func:`insert_pending` puts a loading card at the front
- ``Complete`` - :func:`mark_complete` fills in url and prompt in place
- ``Failed``   - :func:`remove_by_id` drops the card entirely

Each function is pure: it takes a :class:`~dreamworld.ui.models.GalleryState`
and returns a new one, leaving the input untouched.  Completion and failure
for an id that is no longer present are no-ops, so a late response can never
resurrect a card.
"""

import logging

from .models import GalleryEntry, GalleryState, GalleryStatus

logger = logging.getLogger(__name__)


def insert_pending(state: GalleryState, entry_id: str) -> GalleryState:
    """Insert a loading entry at the front of the gallery.

    Args:
        state: Current gallery state
        entry_id: Fresh id for the submission

    Returns:
        New state with the pending entry first

    Raises:
        ValueError: If ``entry_id`` is already present
    """
    if entry_id in state:
        raise ValueError(f"Gallery entry {entry_id!r} already exists")

    entries = {entry_id: GalleryEntry(id=entry_id)}
    entries.update(state.entries)
    return GalleryState(entries=entries)


def mark_complete(state: GalleryState, entry_id: str, url: str, prompt: str) -> GalleryState:
    """Complete the entry with ``entry_id`` in place.

    Args:
        state: Current gallery state
        entry_id: Id of the submission that succeeded
        url: Image URL returned by the server
        prompt: Generated description returned by the server

    Returns:
        New state with the entry completed, or ``state`` unchanged if the id
        is unknown
    """
    if entry_id not in state:
        logger.warning(f"Completion for unknown gallery entry {entry_id!r} ignored")
        return state

    entries = dict(state.entries)
    entries[entry_id] = GalleryEntry(
        id=entry_id,
        status=GalleryStatus.COMPLETE,
        url=url,
        prompt=prompt,
    )
    return GalleryState(entries=entries)


def remove_by_id(state: GalleryState, entry_id: str) -> GalleryState:
    """Remove the entry with ``entry_id``.

    Returns:
        New state without the entry, or ``state`` unchanged if the id is unknown
    """
    if entry_id not in state:
        return state

    return GalleryState(
        entries={key: entry for key, entry in state.entries.items() if key != entry_id}
    )
