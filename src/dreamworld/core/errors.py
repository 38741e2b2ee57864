"""Exception hierarchy for the Dreamworld Image Generator.

Three failure kinds exist end to end:

- :class:`InvalidInput` - the caller supplied a missing prompt or an unknown
  style.  The message is safe to show to the user verbatim (HTTP 400).
- :class:`UpstreamFailure` - a text or image provider raised or returned no
  usable output.  Users only ever see a generic message; the detail is logged
  server-side (HTTP 500).
- :class:`NetworkFailure` - the client could not reach the server at all.
"""

from __future__ import annotations

MISSING_PROMPT_OR_STYLE = "Missing prompt or style"
FAILED_TO_GENERATE = "Failed to generate image"
INVALID_REQUEST_BODY = "Invalid request body"
NETWORK_ERROR = "An error occurred"


class DreamworldError(Exception):
    """Base class for every error raised by this package."""

    message: str = "Unexpected error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class InvalidInput(DreamworldError):
    """Missing prompt, missing style, or a style outside the catalog."""

    message = MISSING_PROMPT_OR_STYLE


class UpstreamFailure(DreamworldError):
    """A provider call failed or produced nothing usable."""

    message = FAILED_TO_GENERATE


class NetworkFailure(DreamworldError):
    """The API could not be reached or returned an unreadable response."""

    message = NETWORK_ERROR
