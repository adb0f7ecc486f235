"""Named navigation commands for binding in a host editor."""

from collections.abc import Callable

from loguru import logger

from zettel_nav.errors import UnknownCommandError
from zettel_nav.navigator import Navigator

COMMANDS: dict[str, Callable[[Navigator], object]] = {
    "forward-heading": Navigator.forward_heading,
    "backward-heading": Navigator.backward_heading,
    "inner-or-forward-heading": Navigator.inner_or_forward_heading,
    "outer-or-backward-heading": Navigator.outer_or_backward_heading,
    "toggle-fold-state": Navigator.toggle_fold_state,
}


def run_command(navigator: Navigator, name: str) -> None:
    """Run one named command against a navigation session.

    Raises:
        UnknownCommandError: ``name`` is not in COMMANDS.
        NavigationError: The command hit a terminal condition.
    """
    command = COMMANDS.get(name)
    if command is None:
        raise UnknownCommandError(name)
    logger.debug("Running {}", name)
    command(navigator)
