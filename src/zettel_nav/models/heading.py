"""Domain models for outline headings."""

from dataclasses import dataclass
from enum import Enum


class Startup(str, Enum):
    """Initial fold state of an opened outline."""

    OVERVIEW = "overview"
    CONTENT = "content"
    SHOWALL = "showall"


@dataclass(frozen=True)
class Heading:
    """A heading and its subtree, as loaded from an outline file."""

    title: str
    body: str = ""
    children: tuple["Heading", ...] = ()


@dataclass(frozen=True)
class Entry:
    """A single heading in document order."""

    id: int
    title: str
    body: str
    level: int
    parent_id: int | None
    sort_order: int
    child_count: int = 0


@dataclass(frozen=True)
class Point:
    """Cursor location: a heading line, that heading's body, or before any heading."""

    entry_id: int | None
    on_heading: bool = True

    @property
    def before_first_heading(self) -> bool:
        return self.entry_id is None


BEFORE_FIRST_HEADING = Point(entry_id=None, on_heading=False)
