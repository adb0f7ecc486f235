"""In-memory outline document implementing OutlineProtocol."""

from collections.abc import Sequence

from loguru import logger

from zettel_nav.core.importer.json_reader import flatten_headings
from zettel_nav.errors import OutlineError
from zettel_nav.models.heading import BEFORE_FIRST_HEADING, Entry, Heading, Point, Startup


class MemoryOutline:
    """An outline held in memory, with a cursor and per-heading fold state.

    Fold state follows org-mode: a heading line is visible when every
    ancestor shows its children, and each heading separately shows or hides
    its body. Top-level heading lines are always visible.

    Args:
        headings: Top-level headings of the document.
        startup: Initial fold state for every heading.
        point: Initial cursor location (default: before the first heading).
    """

    def __init__(
        self,
        headings: Sequence[Heading],
        *,
        startup: Startup = Startup.OVERVIEW,
        point: Point = BEFORE_FIRST_HEADING,
    ) -> None:
        self._entries: tuple[Entry, ...] = tuple(flatten_headings(headings))
        self._children: dict[int | None, list[int]] = {}
        for entry in self._entries:
            self._children.setdefault(entry.parent_id, []).append(entry.id)

        self._shown_children: set[int] = set()
        self._shown_bodies: set[int] = set()
        if startup in (Startup.CONTENT, Startup.SHOWALL):
            self._shown_children.update(e.id for e in self._entries)
        if startup is Startup.SHOWALL:
            self._shown_bodies.update(e.id for e in self._entries)

        self._point = BEFORE_FIRST_HEADING
        self.set_point(point)

    # --- Accessors ---

    @property
    def entries(self) -> tuple[Entry, ...]:
        return self._entries

    @property
    def point(self) -> Point:
        return self._point

    @property
    def current(self) -> Entry | None:
        """The heading holding point, or None before the first heading."""
        if self._point.entry_id is None:
            return None
        return self._entries[self._point.entry_id]

    def find(self, title: str) -> Entry:
        """Return the first heading with the given title."""
        for entry in self._entries:
            if entry.title == title:
                return entry
        msg = f"No heading titled {title!r}"
        raise KeyError(msg)

    def goto(self, title: str, *, on_heading: bool = True) -> None:
        """Move point to the first heading with the given title, revealing it."""
        entry = self.find(title)
        self._move(Point(entry_id=entry.id, on_heading=on_heading))

    def is_visible(self, entry_id: int) -> bool:
        """Return True if the heading line is not hidden inside a fold."""
        return all(a in self._shown_children for a in self._ancestors(entry_id))

    def is_body_visible(self, entry_id: int) -> bool:
        return self.is_visible(entry_id) and entry_id in self._shown_bodies

    def is_children_visible(self, entry_id: int) -> bool:
        return entry_id in self._shown_children

    # --- Queries ---

    def is_last_at_level(self) -> bool:
        entry = self.current
        if entry is None:
            return not self._entries
        return self._next_sibling(entry) is None

    def is_first_at_level(self) -> bool:
        entry = self.current
        if entry is None:
            return True
        return entry.sort_order == 0

    def has_parent(self) -> bool:
        entry = self.current
        return entry is not None and entry.parent_id is not None

    def is_before_first_heading(self) -> bool:
        return self._point.before_first_heading

    def has_children(self) -> bool:
        entry = self.current
        return entry is not None and entry.child_count > 0

    def is_on_heading_line(self) -> bool:
        return self._point.entry_id is not None and self._point.on_heading

    def heading_exists_after_point(self) -> bool:
        if self._point.entry_id is None:
            return bool(self._entries)
        return self._point.entry_id + 1 < len(self._entries)

    # --- Motion ---

    def move_to_parent(self) -> None:
        entry = self._require_current("move to parent")
        if entry.parent_id is None:
            msg = f"Heading {entry.title!r} has no parent"
            raise OutlineError(msg)
        self._move(Point(entry_id=entry.parent_id))

    def move_to_next_sibling(self) -> None:
        entry = self.current
        if entry is None:
            if not self._entries:
                msg = "Outline has no headings"
                raise OutlineError(msg)
            self._move(Point(entry_id=0))
            return
        sibling = self._next_sibling(entry)
        if sibling is None:
            msg = f"Heading {entry.title!r} has no next sibling"
            raise OutlineError(msg)
        self._move(Point(entry_id=sibling))

    def move_to_previous_sibling(self) -> None:
        entry = self._require_current("move to previous sibling")
        if entry.sort_order == 0:
            msg = f"Heading {entry.title!r} has no previous sibling"
            raise OutlineError(msg)
        siblings = self._children[entry.parent_id]
        self._move(Point(entry_id=siblings[entry.sort_order - 1]))

    def move_to_next_visible_heading(self) -> None:
        start = -1 if self._point.entry_id is None else self._point.entry_id
        for entry in self._entries[start + 1 :]:
            if self.is_visible(entry.id):
                self._move(Point(entry_id=entry.id))
                return
        msg = "No visible heading after point"
        raise OutlineError(msg)

    def move_to_heading_line(self) -> None:
        entry = self._require_current("move to heading line")
        if not self._point.on_heading:
            self._move(Point(entry_id=entry.id))

    # --- Visibility ---

    def collapse_subtree(self) -> None:
        entry = self._require_current("collapse subtree")
        for entry_id in (entry.id, *self._descendants(entry.id)):
            self._shown_children.discard(entry_id)
            self._shown_bodies.discard(entry_id)

    def collapse_entry_body(self) -> None:
        self._shown_bodies.discard(self._require_current("collapse entry").id)

    def expand_immediate_children(self) -> None:
        self._shown_children.add(self._require_current("show children").id)

    def expand_entry_body(self) -> None:
        self._shown_bodies.add(self._require_current("show entry").id)

    # --- Point ---

    def get_point(self) -> Point:
        return self._point

    def set_point(self, point: Point) -> None:
        """Move point, opening every fold that hides its heading line."""
        if point.entry_id is not None and not 0 <= point.entry_id < len(self._entries):
            msg = f"Point outside outline: {point!r}"
            raise OutlineError(msg)
        if point.entry_id is not None:
            self._shown_children.update(self._ancestors(point.entry_id))
        self._point = point

    # --- Helpers ---

    def _move(self, point: Point) -> None:
        self.set_point(point)
        logger.debug("Point at {!r}", self.current.title if self.current else None)

    def _require_current(self, action: str) -> Entry:
        entry = self.current
        if entry is None:
            msg = f"Cannot {action}: before first heading"
            raise OutlineError(msg)
        return entry

    def _next_sibling(self, entry: Entry) -> int | None:
        siblings = self._children[entry.parent_id]
        if entry.sort_order + 1 < len(siblings):
            return siblings[entry.sort_order + 1]
        return None

    def _ancestors(self, entry_id: int) -> list[int]:
        ancestors: list[int] = []
        parent_id = self._entries[entry_id].parent_id
        while parent_id is not None:
            ancestors.append(parent_id)
            parent_id = self._entries[parent_id].parent_id
        return ancestors

    def _descendants(self, entry_id: int) -> list[int]:
        # Descendants are contiguous in document order.
        level = self._entries[entry_id].level
        result: list[int] = []
        for entry in self._entries[entry_id + 1 :]:
            if entry.level <= level:
                break
            result.append(entry.id)
        return result
