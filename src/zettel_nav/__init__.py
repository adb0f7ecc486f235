"""Folgezettel-style heading navigation for outline documents."""

from zettel_nav.core.outline.memory import MemoryOutline
from zettel_nav.errors import AtFirstHeadingError, AtLastHeadingError, NavigationError
from zettel_nav.navigator import Navigator
from zettel_nav.protocols import OutlineProtocol

__all__ = [
    "AtFirstHeadingError",
    "AtLastHeadingError",
    "MemoryOutline",
    "NavigationError",
    "Navigator",
    "OutlineProtocol",
]
