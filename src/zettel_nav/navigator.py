"""Directional heading navigation over an outline collaborator.

Each command reads the outline's predicates, moves point and adjusts fold
state through the outline, then re-applies the session's display mode.
Repeated ``inner_or_forward_heading`` walks every heading in pre-order,
which is how a chain of Folgezettel is read top to bottom.
"""

from loguru import logger

from zettel_nav.errors import AtFirstHeadingError, AtLastHeadingError
from zettel_nav.protocols import OutlineProtocol


class Navigator:
    """A navigation session bound to one outline.

    Args:
        outline: The outline to move through.
        show_body: Display mode applied after every move. True shows the
            body of the heading landed on, False hides it.
    """

    def __init__(self, outline: OutlineProtocol, *, show_body: bool = False) -> None:
        self.outline = outline
        self.show_body = show_body

    # --- Commands ---

    def forward_heading(self) -> None:
        """Move to the next heading at the same depth, climbing when the level is exhausted.

        Raises:
            AtLastHeadingError: No heading follows at this or any enclosing level.
        """
        try:
            self._forward()
        finally:
            self.update_fold()

    def backward_heading(self) -> None:
        """Move to the previous heading at the same depth, or up to the parent.

        Raises:
            AtFirstHeadingError: Point is on the first top-level heading.
        """
        try:
            self._backward()
        finally:
            self.update_fold()

    def inner_or_forward_heading(self) -> None:
        """Descend into the first child, or move forward when there is none.

        Raises:
            AtLastHeadingError: Point is on the document's last heading.
        """
        try:
            self._inner_or_forward()
        finally:
            self.update_fold()

    def outer_or_backward_heading(self) -> None:
        """Ascend to the parent, or move backward at top level.

        Raises:
            AtFirstHeadingError: Point is on the first top-level heading.
        """
        try:
            self._outer_or_backward()
        finally:
            self.update_fold()

    def toggle_fold_state(self) -> bool:
        """Flip the display mode and apply it to the current heading.

        Returns:
            The new display mode.
        """
        self.show_body = not self.show_body
        logger.debug("Display mode: {}", "bodies shown" if self.show_body else "headings only")
        self.update_fold()
        return self.show_body

    def update_fold(self) -> None:
        """Show or hide the current entry's body according to the display mode."""
        if self.outline.is_before_first_heading():
            return
        if self.show_body:
            self.outline.expand_entry_body()
        else:
            self.outline.collapse_entry_body()

    # --- Decision logic ---

    def _forward(self) -> None:
        outline = self.outline
        start = outline.get_point()

        while (
            outline.is_last_at_level()
            and outline.has_parent()
            and outline.heading_exists_after_point()
        ):
            logger.debug("Last heading at this level, ascending")
            outline.move_to_parent()

        if outline.is_last_at_level():
            outline.set_point(start)
            raise AtLastHeadingError

        if not outline.is_before_first_heading():
            outline.collapse_subtree()
        outline.move_to_next_sibling()
        outline.expand_immediate_children()

    def _backward(self) -> None:
        outline = self.outline

        if outline.is_before_first_heading():
            raise AtFirstHeadingError

        if not outline.is_first_at_level():
            outline.collapse_subtree()
            outline.move_to_previous_sibling()
            outline.expand_immediate_children()
            return

        if outline.has_parent():
            logger.debug("First heading at this level, ascending")
            outline.move_to_heading_line()
            outline.collapse_entry_body()
            outline.collapse_subtree()
            outline.move_to_parent()
        elif outline.is_on_heading_line():
            raise AtFirstHeadingError
        else:
            outline.move_to_heading_line()

    def _inner_or_forward(self) -> None:
        outline = self.outline

        if outline.is_before_first_heading():
            self._forward()
            return

        outline.collapse_entry_body()
        outline.expand_immediate_children()
        if outline.has_children():
            logger.debug("Descending to first child")
            outline.move_to_next_visible_heading()
            outline.expand_immediate_children()
        else:
            self._forward()

    def _outer_or_backward(self) -> None:
        outline = self.outline

        if outline.has_parent():
            logger.debug("Ascending to parent")
            outline.move_to_heading_line()
            outline.collapse_subtree()
            outline.move_to_parent()
        else:
            self._backward()
