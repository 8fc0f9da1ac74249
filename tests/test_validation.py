"""Tests for record validation."""

import dataclasses
from datetime import datetime, timezone

import pytest

from content_svc.errors import (
    InvalidEnum,
    MalformedPair,
    MalformedValue,
    MissingField,
    ValidationError,
)
from content_svc.records import parse_date, validate, validate_integration, validate_record
from content_svc.records.types import (
    Author,
    Breadcrumb,
    ConnectionMethod,
    FAQ,
    FieldMapping,
    Section,
)

from conftest import make_entry, make_record


class TestValidateRecord:
    def test_valid_record_passes(self, record):
        assert validate_record(record) is record

    def test_missing_title(self, record):
        with pytest.raises(MissingField) as exc_info:
            validate_record(dataclasses.replace(record, title=""))
        assert exc_info.value.field == "title"
        assert exc_info.value.record_id == "intent-guide"

    def test_whitespace_title_is_missing(self, record):
        with pytest.raises(MissingField) as exc_info:
            validate_record(dataclasses.replace(record, title="   "))
        assert exc_info.value.field == "title"

    def test_missing_id(self, record):
        with pytest.raises(MissingField) as exc_info:
            validate_record(dataclasses.replace(record, id=""))
        assert exc_info.value.field == "id"

    def test_missing_description(self, record):
        with pytest.raises(MissingField) as exc_info:
            validate_record(dataclasses.replace(record, description=""))
        assert exc_info.value.field == "description"

    def test_faq_without_answer(self, record):
        faqs = (FAQ("Q1", "A1"), FAQ("Q2", ""))
        with pytest.raises(MalformedPair) as exc_info:
            validate_record(dataclasses.replace(record, faqs=faqs))
        assert exc_info.value.field == "faqs"
        assert exc_info.value.index == 1
        assert exc_info.value.missing == "answer"

    def test_breadcrumb_without_path(self, record):
        crumbs = (Breadcrumb("Home", "/"), Breadcrumb("Blog", ""))
        with pytest.raises(MalformedPair) as exc_info:
            validate_record(dataclasses.replace(record, breadcrumbs=crumbs))
        assert exc_info.value.field == "breadcrumbs"
        assert exc_info.value.missing == "path"

    def test_wrong_pair_type(self, record):
        with pytest.raises(MalformedPair):
            validate_record(dataclasses.replace(record, faqs=({"question": "Q"},)))

    def test_section_without_title(self, record):
        with pytest.raises(MalformedPair) as exc_info:
            validate_record(dataclasses.replace(record, sections=(Section("", body="text"),)))
        assert exc_info.value.field == "sections"

    def test_blank_keyword(self, record):
        with pytest.raises(MalformedPair) as exc_info:
            validate_record(dataclasses.replace(record, keywords=("ok", " ")))
        assert exc_info.value.field == "keywords"
        assert exc_info.value.index == 1

    def test_author_without_name(self, record):
        with pytest.raises(MalformedPair) as exc_info:
            validate_record(dataclasses.replace(record, author=Author("")))
        assert exc_info.value.field == "author"

    def test_optional_fields_may_be_absent(self):
        record = make_record(
            faqs=(), publish_date=None, updated_date=None, author=None,
            hero_image=None, breadcrumbs=(), keywords=(), sections=(), key_facts=(),
        )
        assert validate_record(record) is record

    def test_error_message_names_record_and_field(self, record):
        with pytest.raises(ValidationError, match=r"\[intent-guide\].*'title'"):
            validate_record(dataclasses.replace(record, title=""))

    @pytest.mark.parametrize("record_id", ["../../escaped", "Intent-Guide", "intent_guide", "a--b", "-a"])
    def test_id_must_be_url_safe(self, record, record_id):
        with pytest.raises(MalformedValue) as exc_info:
            validate_record(dataclasses.replace(record, id=record_id))
        assert exc_info.value.field == "id"

    @pytest.mark.parametrize("field", ["publish_date", "updated_date"])
    def test_invalid_date(self, record, field):
        with pytest.raises(MalformedValue) as exc_info:
            validate_record(dataclasses.replace(record, **{field: "sometime in spring"}))
        assert exc_info.value.field == field

    def test_timestamp_dates(self, record):
        dated = dataclasses.replace(record, publish_date="2026-02-04T09:30:00Z")
        assert validate_record(dated) is dated

    def test_ordered_must_be_boolean(self, record):
        with pytest.raises(MalformedPair) as exc_info:
            validate_record(dataclasses.replace(record, sections=(Section("Steps", items=("a",), ordered="false"),)))
        assert exc_info.value.missing == "ordered"


class TestValidateIntegration:
    def test_valid_entry_passes(self, entry):
        assert validate_integration(entry) is entry

    def test_string_method_is_normalised(self):
        entry = make_entry("zoominfo", connection_method="webhook")
        valid = validate_integration(entry)
        assert valid.connection_method is ConnectionMethod.WEBHOOK
        assert entry.connection_method == "webhook"

    def test_hyphenated_method(self):
        valid = validate_integration(make_entry("gong", connection_method="coming-soon"))
        assert valid.connection_method is ConnectionMethod.COMING_SOON

    def test_unknown_method(self):
        with pytest.raises(InvalidEnum) as exc_info:
            validate_integration(make_entry("x", connection_method="carrier-pigeon"))
        assert exc_info.value.field == "connection_method"
        assert exc_info.value.value == "carrier-pigeon"
        assert "native" in exc_info.value.allowed

    def test_method_is_case_sensitive(self):
        with pytest.raises(InvalidEnum):
            validate_integration(make_entry("x", connection_method="Native"))

    @pytest.mark.parametrize("field", ["slug", "name", "category", "description", "why_use_it"])
    def test_required_strings(self, field):
        with pytest.raises(MissingField) as exc_info:
            validate_integration(dataclasses.replace(make_entry("x"), **{field: ""}))
        assert exc_info.value.field == field

    def test_empty_setup_steps(self):
        with pytest.raises(MissingField) as exc_info:
            validate_integration(make_entry("x", setup_steps=()))
        assert exc_info.value.field == "setup_steps"

    def test_mapping_without_target(self):
        mappings = (FieldMapping("email", "", "Creates a contact"),)
        with pytest.raises(MalformedPair) as exc_info:
            validate_integration(make_entry("x", field_mappings=mappings))
        assert exc_info.value.field == "field_mappings"
        assert exc_info.value.missing == "target_field"

    @pytest.mark.parametrize("slug", ["../../escaped", "Google Sheets", "hub/spot", "sheets-"])
    def test_slug_must_be_url_safe(self, slug):
        with pytest.raises(MalformedValue) as exc_info:
            validate_integration(dataclasses.replace(make_entry("x"), slug=slug))
        assert exc_info.value.field == "slug"
        assert exc_info.value.value == slug

    def test_mappings_and_workflows_are_optional(self):
        entry = make_entry("x", field_mappings=(), workflows=(), faqs=(), keywords=())
        assert validate_integration(entry) is entry


class TestValidateDispatch:
    def test_dispatches_by_type(self, entry, record):
        assert validate(entry) is entry
        assert validate(record) is record

    def test_unknown_type(self):
        with pytest.raises(TypeError):
            validate({"id": "x"})

    def test_errors_are_validation_errors(self):
        for exc_type in (MissingField, InvalidEnum, MalformedPair, MalformedValue):
            assert issubclass(exc_type, ValidationError)


class TestParseDate:
    def test_date_is_midnight_utc(self):
        assert parse_date("2026-02-18") == datetime(2026, 2, 18, tzinfo=timezone.utc)

    def test_offset_is_normalised(self):
        assert parse_date("2026-02-18T10:00:00+02:00") == datetime(2026, 2, 18, 8, tzinfo=timezone.utc)

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_date("18/02/2026")
