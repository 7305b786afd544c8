"""Tests for request schemas."""

import pytest
from pydantic import ValidationError

from app.domains.documents.schemas import DocumentRenameRequest
from app.domains.highlights.schemas import HighlightCreate, HighlightNoteUpdate, RegionSchema
from app.domains.identity.schemas import UserCreate

pytestmark = pytest.mark.unit

REGION = {"x1": 10, "y1": 20, "x2": 110, "y2": 40, "width": 100, "height": 20}


def test_region_schema_converts_to_region() -> None:
    region = RegionSchema(**REGION).to_region()
    assert (region.x1, region.y1, region.x2, region.y2) == (10, 20, 110, 40)
    assert (region.width, region.height) == (100, 20)


def test_region_schema_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        RegionSchema(**REGION, rotation=90)


def test_region_schema_rejects_missing_fields() -> None:
    payload = dict(REGION)
    payload.pop("height")
    with pytest.raises(ValidationError):
        RegionSchema(**payload)


def test_region_schema_rejects_inconsistent_width() -> None:
    with pytest.raises(ValidationError, match="width"):
        RegionSchema(**{**REGION, "width": 50})


def test_region_schema_rejects_negative_size() -> None:
    with pytest.raises(ValidationError):
        RegionSchema(**{**REGION, "x2": 0, "width": -10})


def test_highlight_create_rejects_blank_text() -> None:
    with pytest.raises(ValidationError):
        HighlightCreate(document_external_id="abc", text="   ", page_number=1, region=REGION)


def test_highlight_create_rejects_page_zero() -> None:
    with pytest.raises(ValidationError):
        HighlightCreate(document_external_id="abc", text="text", page_number=0, region=REGION)


def test_note_update_defaults_to_none() -> None:
    assert HighlightNoteUpdate().note is None


def test_rename_request_strips_name() -> None:
    assert DocumentRenameRequest(new_name="  Report.pdf ").new_name == "Report.pdf"


def test_rename_request_rejects_whitespace() -> None:
    with pytest.raises(ValidationError):
        DocumentRenameRequest(new_name="   ")


def test_user_create_strips_name_and_checks_email() -> None:
    user = UserCreate(name=" Ann ", email="a@x.com", password="p")
    assert user.name == "Ann"

    with pytest.raises(ValidationError):
        UserCreate(name="Ann", email="not-an-email", password="p")
