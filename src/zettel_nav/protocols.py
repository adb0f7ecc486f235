"""Protocols for the outline collaborator driven by the navigator."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class OutlineProtocol(Protocol):
    """Protocol for outline documents the navigator can move through.

    All methods act on the heading holding point. When point is inside a
    heading's body, that heading is the current one.
    """

    def is_last_at_level(self) -> bool:
        """Return True if no later sibling shares the current heading's parent."""
        ...

    def is_first_at_level(self) -> bool:
        """Return True if no earlier sibling shares the current heading's parent."""
        ...

    def has_parent(self) -> bool:
        """Return True if the current heading is nested under another heading."""
        ...

    def is_before_first_heading(self) -> bool:
        """Return True if point precedes the document's first heading."""
        ...

    def has_children(self) -> bool:
        """Return True if the current heading has at least one child heading."""
        ...

    def is_on_heading_line(self) -> bool:
        """Return True if point sits on a heading line rather than in a body."""
        ...

    def heading_exists_after_point(self) -> bool:
        """Return True if any heading follows point in document order."""
        ...

    def move_to_parent(self) -> None:
        """Move point to the parent heading's line."""
        ...

    def move_to_next_sibling(self) -> None:
        """Move point to the next heading at the same level under the same parent."""
        ...

    def move_to_previous_sibling(self) -> None:
        """Move point to the previous heading at the same level under the same parent."""
        ...

    def move_to_next_visible_heading(self) -> None:
        """Move point to the next heading whose line is currently visible."""
        ...

    def move_to_heading_line(self) -> None:
        """Move point from a body to its heading line; no-op on a heading line."""
        ...

    def collapse_subtree(self) -> None:
        """Hide the body and all descendants of the current heading."""
        ...

    def collapse_entry_body(self) -> None:
        """Hide the body text of the current heading."""
        ...

    def expand_immediate_children(self) -> None:
        """Reveal the child heading lines of the current heading."""
        ...

    def expand_entry_body(self) -> None:
        """Reveal the body text of the current heading."""
        ...

    def get_point(self) -> Any:
        """Return an opaque value identifying point."""
        ...

    def set_point(self, point: Any) -> None:
        """Restore point from a value returned by get_point()."""
        ...
