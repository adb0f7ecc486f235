"""Read outline JSON files into heading models."""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from zettel_nav.models.heading import Entry, Heading


def _check_heading(data: Any) -> None:
    if not isinstance(data, dict):
        msg = f"Heading must be an object, got {type(data).__name__}: {data!r}"
        raise ValueError(msg)
    if "title" not in data:
        msg = f"Heading without title: {sorted(data.keys())!r}"
        raise ValueError(msg)
    if not isinstance(data.get("children", []), list):
        msg = f"Children of {data['title']!r} must be a list"
        raise ValueError(msg)


def parse_heading(data: dict[str, Any]) -> Heading:
    """Build a Heading and its subtree from a nested dict."""
    # Collect raw headings in document order with an explicit stack, then
    # build the frozen tree bottom-up: children always follow their parent.
    raws: list[dict[str, Any]] = []
    child_ids: list[list[int]] = []
    todo: list[tuple[Any, int | None]] = [(data, None)]
    while todo:
        raw, parent = todo.pop()
        _check_heading(raw)
        index = len(raws)
        raws.append(raw)
        child_ids.append([])
        if parent is not None:
            child_ids[parent].append(index)
        for child in reversed(raw.get("children", [])):
            todo.append((child, index))

    built: dict[int, Heading] = {}
    for index in reversed(range(len(raws))):
        raw = raws[index]
        built[index] = Heading(
            title=raw["title"],
            body=raw.get("body", ""),
            children=tuple(built[c] for c in child_ids[index]),
        )
    return built[0]


def parse_outline_data(data: dict[str, Any]) -> tuple[Heading, ...]:
    """Parse an outline document dict into its top-level headings.

    Args:
        data: Document dict with a ``headings`` list. Each heading has a
            ``title``, an optional ``body`` and optional ``children``.

    Returns:
        Top-level headings with their subtrees.

    Raises:
        ValueError: The document or one of its headings is malformed.
    """
    if not isinstance(data, dict):
        msg = f"Outline must be an object, got {type(data).__name__}"
        raise ValueError(msg)
    headings = data.get("headings", [])
    if not isinstance(headings, list):
        msg = "Outline headings must be a list"
        raise ValueError(msg)
    return tuple(parse_heading(h) for h in headings)


def load_outline_file(path: Path) -> tuple[Heading, ...]:
    """Read and parse an outline JSON file."""
    return parse_outline_data(json.loads(path.read_text(encoding="utf-8")))


def flatten_headings(headings: Sequence[Heading]) -> list[Entry]:
    """Flatten a heading tree into entries in document order.

    Levels start at 1 for top-level headings. Entry ids are positions in
    the returned list, so a heading's descendants directly follow it.
    """
    result: list[Entry] = []

    # Depth-first with an explicit stack; children are pushed in reverse
    # so they pop in document order.
    todo: list[tuple[Heading, int | None, int, int]] = [
        (h, None, 1, i) for i, h in reversed(list(enumerate(headings)))
    ]
    while todo:
        heading, parent_id, level, sort_order = todo.pop()
        entry_id = len(result)
        result.append(
            Entry(
                id=entry_id,
                title=heading.title,
                body=heading.body,
                level=level,
                parent_id=parent_id,
                sort_order=sort_order,
                child_count=len(heading.children),
            )
        )
        for i, child in reversed(list(enumerate(heading.children))):
            todo.append((child, entry_id, level + 1, i))

    return result
