"""Tests for the in-memory outline: structure, motion and fold state."""

import pytest

from tests.unit.samples import SAMPLE_OUTLINE
from zettel_nav.core.importer.json_reader import parse_outline_data
from zettel_nav.core.outline.memory import MemoryOutline
from zettel_nav.errors import OutlineError
from zettel_nav.models.heading import Point, Startup


def test_overview_shows_only_top_level_headings(outline: MemoryOutline) -> None:
    visible = [e.title for e in outline.entries if outline.is_visible(e.id)]
    assert visible == ["A", "B"]
    assert not any(outline.is_body_visible(e.id) for e in outline.entries)


def test_content_startup_shows_all_headings_without_bodies() -> None:
    outline = MemoryOutline(parse_outline_data(SAMPLE_OUTLINE), startup=Startup.CONTENT)
    assert all(outline.is_visible(e.id) for e in outline.entries)
    assert not any(outline.is_body_visible(e.id) for e in outline.entries)


def test_showall_startup_shows_everything() -> None:
    outline = MemoryOutline(parse_outline_data(SAMPLE_OUTLINE), startup=Startup.SHOWALL)
    assert all(outline.is_body_visible(e.id) for e in outline.entries)


def test_queries_before_first_heading(outline: MemoryOutline) -> None:
    assert outline.is_before_first_heading()
    assert outline.current is None
    assert not outline.is_last_at_level()
    assert outline.is_first_at_level()
    assert not outline.has_parent()
    assert not outline.has_children()
    assert not outline.is_on_heading_line()
    assert outline.heading_exists_after_point()


def test_sibling_queries(outline: MemoryOutline) -> None:
    outline.goto("A1")
    assert outline.is_first_at_level()
    assert not outline.is_last_at_level()
    assert outline.has_parent()

    outline.goto("B")
    assert not outline.is_first_at_level()
    assert outline.is_last_at_level()
    assert not outline.has_parent()
    assert outline.has_children()


def test_heading_exists_after_point_false_at_end(outline: MemoryOutline) -> None:
    outline.goto("B1")
    assert not outline.heading_exists_after_point()
    outline.goto("B")
    assert outline.heading_exists_after_point()


def test_goto_reveals_ancestors(outline: MemoryOutline) -> None:
    outline.goto("A2a")
    assert outline.is_visible(outline.find("A2a").id)
    assert outline.is_visible(outline.find("A1").id)


def test_goto_unknown_title_raises(outline: MemoryOutline) -> None:
    with pytest.raises(KeyError):
        outline.goto("Z")


def test_sibling_and_parent_moves(outline: MemoryOutline) -> None:
    outline.goto("A1")
    outline.move_to_next_sibling()
    assert outline.current is not None and outline.current.title == "A2"
    outline.move_to_previous_sibling()
    assert outline.current.title == "A1"
    outline.move_to_parent()
    assert outline.current.title == "A"


def test_next_sibling_from_before_first_heading_lands_on_first(outline: MemoryOutline) -> None:
    outline.move_to_next_sibling()
    assert outline.point == Point(entry_id=0)


def test_illegal_moves_raise(outline: MemoryOutline) -> None:
    outline.goto("A")
    with pytest.raises(OutlineError):
        outline.move_to_parent()
    with pytest.raises(OutlineError):
        outline.move_to_previous_sibling()
    outline.goto("B")
    with pytest.raises(OutlineError):
        outline.move_to_next_sibling()


def test_primitives_before_first_heading_raise(outline: MemoryOutline) -> None:
    with pytest.raises(OutlineError, match="before first heading"):
        outline.move_to_heading_line()
    with pytest.raises(OutlineError):
        outline.collapse_subtree()


def test_next_visible_heading_skips_folded_children(outline: MemoryOutline) -> None:
    outline.goto("A")
    outline.collapse_subtree()
    outline.move_to_next_visible_heading()
    assert outline.current is not None and outline.current.title == "B"


def test_next_visible_heading_enters_shown_children(outline: MemoryOutline) -> None:
    outline.goto("A")
    outline.expand_immediate_children()
    outline.move_to_next_visible_heading()
    assert outline.current is not None and outline.current.title == "A1"


def test_collapse_subtree_folds_descendants(outline: MemoryOutline) -> None:
    outline.goto("A2a")
    outline.expand_entry_body()
    outline.goto("A")
    outline.collapse_subtree()
    outline.expand_immediate_children()

    a2 = outline.find("A2")
    assert outline.is_visible(a2.id)
    assert not outline.is_children_visible(a2.id)
    assert not outline.is_body_visible(outline.find("A2a").id)


def test_move_to_heading_line_from_body(outline: MemoryOutline) -> None:
    outline.goto("A2", on_heading=False)
    assert not outline.is_on_heading_line()
    outline.move_to_heading_line()
    assert outline.is_on_heading_line()


def test_set_point_outside_outline_raises(outline: MemoryOutline) -> None:
    with pytest.raises(OutlineError):
        outline.set_point(Point(entry_id=99))


def test_initial_point_can_be_given() -> None:
    outline = MemoryOutline(parse_outline_data(SAMPLE_OUTLINE), point=Point(entry_id=4))
    assert outline.current is not None and outline.current.title == "B"
