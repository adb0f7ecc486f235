"""Shared test fixtures."""

import pytest

from tests.unit.samples import SAMPLE_OUTLINE
from zettel_nav.core.importer.json_reader import parse_outline_data
from zettel_nav.core.outline.memory import MemoryOutline
from zettel_nav.navigator import Navigator


@pytest.fixture
def outline() -> MemoryOutline:
    """Return the sample outline, folded to top-level headings, point before A."""
    return MemoryOutline(parse_outline_data(SAMPLE_OUTLINE))


@pytest.fixture
def navigator(outline: MemoryOutline) -> Navigator:
    """Return a navigation session on the sample outline in headings-only mode."""
    return Navigator(outline)
