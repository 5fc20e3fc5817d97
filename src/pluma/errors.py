"""Exception classes for Pluma.

Two failure classes exist during a parse:

- Structural violations: an event arrives that the parser state machine has
  no transition for. Raised as TransitionError and never caught inside the
  package; the parse aborts.
- Tolerated malformed markup: absorbed by the Builder as logged no-ops.
  No exception is raised for these.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pluma.parser import Event, State


class PlumaError(Exception):
    """Base exception for all Pluma errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(PlumaError):
    """Error during parsing.

    Raised when the parser receives an event sequence it cannot accept.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class TransitionError(ParseError):
    """No transition exists for an event in the current parser state."""

    def __init__(
        self,
        state: State,
        event: Event,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.state = state
        self.event = event
        super().__init__(
            f"no transition from {state.name} on {event.name}",
            lineno=lineno,
            source_file=source_file,
        )


class RenderError(PlumaError):
    """Error during rendering.

    Raised when a renderer meets a node type it does not know.
    """

    pass


class SerializationError(PlumaError):
    """Error converting a dict back into document nodes."""

    pass
