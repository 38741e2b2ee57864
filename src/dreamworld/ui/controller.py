"""Gallery controller: drives submissions through the gallery state machine.

:class:`GalleryController` owns one session's gallery.  Every call to
:meth:`GalleryController.submit` follows the same path:

1. Blank prompt or style: fail immediately.  No card, no network call, the
   error message is set.
2. Otherwise insert a loading card with a fresh id at the front, clear the
   error message, and call the API.
3. Success completes that card in place.  Any failure removes the card and
   sets the error message.

Several submissions may be in flight at once.  They complete in any order and
each one only touches its own card.  ``is_busy`` stays true until the last one
settles.

All state changes happen on the event loop between awaits, so no locking is
needed.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Callable

from dreamworld.core.errors import MISSING_PROMPT_OR_STYLE, NETWORK_ERROR, DreamworldError
from dreamworld.core.styles import SURPRISE_PROMPTS

from .client import DreamworldClient
from .loading import LOADING_TEXT_INTERVAL, LOADING_TEXTS, LoadingTextCycle
from .models import GalleryEntry, GalleryState, new_entry_id
from .state import insert_pending, mark_complete, remove_by_id

logger = logging.getLogger(__name__)


class GalleryController:
    """Session gallery backed by a :class:`DreamworldClient`.

    Attributes:
        client: API client used for generations.
        state: Current :class:`GalleryState` (replaced on every transition).
        error: Last failure message, or None.
        loading_text: Rotating label shown while busy.  It starts advancing
            when a submission begins with nothing else in flight and stops
            once the last one settles.
    """

    def __init__(
        self,
        client: DreamworldClient,
        *,
        id_factory: Callable[[], str] = new_entry_id,
        loading_texts: tuple[str, ...] = LOADING_TEXTS,
        loading_interval: float = LOADING_TEXT_INTERVAL,
    ) -> None:
        self.client = client
        self.state = GalleryState()
        self.error: str | None = None
        self.loading_text = LoadingTextCycle(loading_texts)
        self._id_factory = id_factory
        self._in_flight = 0
        self._loading_interval = loading_interval
        self._animation: asyncio.Task | None = None

    @property
    def is_busy(self) -> bool:
        """True while at least one submission is waiting for the server."""
        return self._in_flight > 0

    @property
    def entries(self) -> list[GalleryEntry]:
        """Gallery cards, newest first."""
        return self.state.as_list()

    def clear_error(self) -> None:
        self.error = None

    def surprise_prompt(self, rng: random.Random | None = None) -> str:
        """Pick a random idea for the "Surprise Me" button."""
        return (rng or random).choice(SURPRISE_PROMPTS)

    def _fail(self, entry_id: str, message: str) -> None:
        self.state = remove_by_id(self.state, entry_id)
        self.error = message

    async def submit(self, prompt: str, style: str, **options) -> GalleryEntry | None:
        """Generate one image and track it in the gallery.

        Args:
            prompt: Scene description.
            style: Style name.
            **options: Forwarded to :meth:`DreamworldClient.generate_image`.

        Returns:
            The completed entry, or None if the submission failed.
        """
        if not (prompt or "").strip() or not style:
            self.error = MISSING_PROMPT_OR_STYLE
            return None

        entry_id = self._id_factory()
        self.state = insert_pending(self.state, entry_id)
        self.error = None
        self._in_flight += 1
        if self._in_flight == 1:
            self.loading_text.reset()
            if self._animation is None or self._animation.done():
                self._animation = asyncio.create_task(
                    self.animate_loading_text(self._loading_interval)
                )

        try:
            result = await self.client.generate_image(prompt, style, **options)
        except DreamworldError as e:
            logger.error(f"Error generating image: {e}")
            self._fail(entry_id, e.message)
            return None
        except Exception as e:
            logger.error(f"Unexpected error generating image: {e}", exc_info=True)
            self._fail(entry_id, NETWORK_ERROR)
            return None
        else:
            self.state = mark_complete(
                self.state, entry_id, url=result.image_url, prompt=result.generated_prompt
            )
            return self.state.get(entry_id)
        finally:
            self._in_flight -= 1
            # Cancelled submissions must not leave a card loading forever.
            entry = self.state.get(entry_id)
            if entry is not None and entry.is_loading:
                self.state = remove_by_id(self.state, entry_id)

    async def animate_loading_text(self, interval: float = LOADING_TEXT_INTERVAL) -> None:
        """Advance :attr:`loading_text` every ``interval`` seconds while busy.

        Returns once no submission is in flight.  :meth:`submit` schedules it
        automatically.
        """
        self.loading_text.reset()
        while self.is_busy:
            await asyncio.sleep(interval)
            if not self.is_busy:
                break
            self.loading_text.advance()
