"""Tests for domain entities: regions, highlights, documents."""

import math
import uuid

import pytest

from app.core.exceptions import ValidationError
from app.domains.documents.entities import Document, normalize_display_name, DEFAULT_DISPLAY_NAME
from app.domains.highlights.entities import Highlight, Region

pytestmark = pytest.mark.unit


def _region(**overrides) -> Region:
    values = {"x1": 10, "y1": 20, "x2": 110, "y2": 40, "width": 100, "height": 20}
    values.update(overrides)
    return Region(**values)


def test_region_accepts_consistent_geometry() -> None:
    region = _region()
    assert region.validate() is region


def test_region_allows_small_rounding_difference() -> None:
    _region(x1=10.1, x2=110.3, width=100.205).validate()


def test_region_rejects_width_mismatch() -> None:
    with pytest.raises(ValidationError, match="width"):
        _region(width=90).validate()


def test_region_rejects_height_mismatch() -> None:
    with pytest.raises(ValidationError, match="height"):
        _region(height=5).validate()


def test_region_rejects_inverted_corners() -> None:
    with pytest.raises(ValidationError, match="inverted"):
        _region(x1=110, x2=10, width=100).validate()


def test_region_rejects_non_finite_values() -> None:
    with pytest.raises(ValidationError, match="finite"):
        _region(y2=math.inf).validate()


def test_region_rejects_non_numeric_values() -> None:
    with pytest.raises(ValidationError, match="number"):
        _region(x1="10").validate()


def test_create_highlight_starts_with_empty_note() -> None:
    highlight = Highlight.create_highlight(
        owner_id=uuid.uuid4(),
        document_id=uuid.uuid4(),
        text="important",
        page_number=2,
        region=_region(),
    )

    assert highlight.note == ""
    assert highlight.page_number == 2
    assert highlight.region == _region()


@pytest.mark.parametrize("text", ["", "   "])
def test_create_highlight_rejects_empty_text(text: str) -> None:
    with pytest.raises(ValidationError):
        Highlight.create_highlight(uuid.uuid4(), uuid.uuid4(), text, 1, _region())


@pytest.mark.parametrize("page_number", [0, -3, True])
def test_create_highlight_rejects_bad_page_number(page_number) -> None:
    with pytest.raises(ValidationError, match="Page number"):
        Highlight.create_highlight(uuid.uuid4(), uuid.uuid4(), "text", page_number, _region())


def test_update_note_none_clears_note() -> None:
    highlight = Highlight.create_highlight(uuid.uuid4(), uuid.uuid4(), "text", 1, _region())
    highlight.update_note("remember this")
    assert highlight.note == "remember this"

    highlight.update_note(None)
    assert highlight.note == ""


def test_normalize_display_name_trims() -> None:
    assert normalize_display_name("  notes.pdf \n") == "notes.pdf"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_normalize_display_name_rejects_blank(name) -> None:
    with pytest.raises(ValidationError, match="Name cannot be empty"):
        normalize_display_name(name)


def test_normalize_display_name_rejects_long_name() -> None:
    with pytest.raises(ValidationError):
        normalize_display_name("a" * 256)


def test_document_rename_rejects_whitespace_and_keeps_old_name() -> None:
    document = Document.register(uuid.uuid4(), "prefix/abc.pdf", DEFAULT_DISPLAY_NAME)

    with pytest.raises(ValidationError):
        document.rename("   ")

    assert document.display_name == DEFAULT_DISPLAY_NAME


def test_document_register_requires_external_id() -> None:
    with pytest.raises(ValidationError):
        Document.register(uuid.uuid4(), "", "notes.pdf")


def test_normalized_region_derives_size_from_corners() -> None:
    region = _region(x1=10.5, x2=110.5, width=100.004, y1=20, y2=40, height=19.996).normalized()

    assert region.width == 100.0
    assert region.height == 20
    assert (region.x1, region.x2) == (10.5, 110.5)


def test_normalized_region_still_validates() -> None:
    with pytest.raises(ValidationError):
        _region(width=90).normalized()


def test_create_highlight_stores_derived_size() -> None:
    highlight = Highlight.create_highlight(
        uuid.uuid4(), uuid.uuid4(), "text", 1, _region(width=100.008, height=19.995)
    )

    assert highlight.region.width == 100
    assert highlight.region.height == 20
