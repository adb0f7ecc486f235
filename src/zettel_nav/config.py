"""Configuration constants for zettel-nav."""

from pathlib import Path

from zettel_nav.models.heading import Startup

# Outline file location. First file found is used.
OUTLINE_FILES: list[Path] = [
    Path("~/.local/share/zettel-nav/zettelkasten.json").expanduser(),
    Path("~/.config/zettel-nav/zettelkasten.json").expanduser(),
    Path("~/zettelkasten.json").expanduser(),
]

# Fold state applied to every heading when an outline is opened.
DEFAULT_STARTUP: Startup = Startup.OVERVIEW

# Whether entry bodies are shown after each move when a session starts.
DEFAULT_SHOW_BODY: bool = False


def resolve_outline_file() -> Path | None:
    """Return the first existing outline file, or None."""
    for candidate in OUTLINE_FILES:
        if candidate.is_file():
            return candidate
    return None
