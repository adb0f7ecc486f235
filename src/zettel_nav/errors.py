"""Exceptions raised by navigation commands and outline implementations."""


class NavigationError(Exception):
    """A navigation command stopped without moving.

    These are user-visible and non-fatal: the caller reports the message
    and carries on with the next command.
    """


class AtLastHeadingError(NavigationError):
    def __init__(self) -> None:
        super().__init__("Already at the last heading")


class AtFirstHeadingError(NavigationError):
    def __init__(self) -> None:
        super().__init__("Already at the first top-level heading")


class UnknownCommandError(NavigationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown command: {name!r}")
        self.name = name


class OutlineError(RuntimeError):
    """An outline primitive was called where it cannot apply."""
