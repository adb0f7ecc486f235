"""Render the visible part of an outline as org-style text."""

import io

from zettel_nav.core.outline.memory import MemoryOutline


def render_outline(outline: MemoryOutline, *, mark_point: bool = True) -> str:
    """Render visible headings and bodies the way a folded editor shows them.

    Args:
        outline: The outline to render.
        mark_point: Prefix the heading holding point with ``>``.

    Returns:
        One line per visible heading (``*`` per level), followed by its body
        lines when shown. Headings hiding content end in `` ...``.
    """
    current = outline.current
    out = io.StringIO()
    for entry in outline.entries:
        if not outline.is_visible(entry.id):
            continue

        marker = "> " if mark_point and current is not None and current.id == entry.id else "  "
        body_shown = bool(entry.body) and outline.is_body_visible(entry.id)
        children_hidden = entry.child_count > 0 and not outline.is_children_visible(entry.id)
        body_hidden = bool(entry.body) and not body_shown
        folded = " ..." if children_hidden or body_hidden else ""

        out.write(f"{marker}{'*' * entry.level} {entry.title}{folded}\n")
        if body_shown:
            for line in entry.body.split("\n"):
                out.write(f"  {line}\n")

    return out.getvalue()
