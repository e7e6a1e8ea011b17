"""Tests for the order form validator, link sanitizer and recipient parsing."""

import datetime

import pytest

from frontend.app.errors import FormValidationError
from frontend.app.schemas import Recipient, RecipientList, sanitize_link, validate_form

DEADLINE = datetime.datetime(2025, 3, 4, 15, 30, tzinfo=datetime.timezone.utc)


def test_valid_form_passes():
    form = validate_form("大茗", "https://order.example.test/g/1", DEADLINE, None)

    assert form.vendor == "大茗"
    assert form.note is None


def test_empty_vendor_is_required():
    with pytest.raises(FormValidationError) as exc_info:
        validate_form("", "https://order.example.test/g/1", DEADLINE)

    assert exc_info.value.field_errors == {"vendor": "必填"}


@pytest.mark.parametrize("link", ["", "not a url", "order.example.test/g/1"])
def test_link_must_be_a_url(link):
    with pytest.raises(FormValidationError) as exc_info:
        validate_form("大茗", link, DEADLINE)

    assert exc_info.value.field_errors == {"link": "需要有效網址"}


def test_missing_deadline_is_required():
    with pytest.raises(FormValidationError) as exc_info:
        validate_form("大茗", "https://order.example.test/g/1", None)

    assert exc_info.value.field_errors == {"deadline": "必填"}


def test_all_invalid_fields_are_reported_together():
    with pytest.raises(FormValidationError) as exc_info:
        validate_form(None, None, None, None)

    assert set(exc_info.value.field_errors) == {"vendor", "link", "deadline"}


def test_sanitize_link_strips_invisible_and_normalizes_spaces():
    raw = "  \u3000https://order.example.test/g/1\u200b\ufeff "

    assert sanitize_link(raw) == "https://order.example.test/g/1"


def test_sanitize_link_keeps_inner_full_width_space_as_plain_space():
    assert sanitize_link("https://x.test/a\u3000b") == "https://x.test/a b"


def test_sanitize_link_handles_none():
    assert sanitize_link(None) == ""


def test_recipient_coerces_spreadsheet_values():
    recipient = Recipient.model_validate({"name": "Dan", "email": "dan@corp.test", "active": "TRUE", "note": 42})

    assert recipient.active is True
    assert recipient.note == "42"
    assert recipient.dept is None


def test_recipient_choice_label():
    assert Recipient(name="Dan", email="dan@corp.test", dept="IT").choice_label() == "Dan <dan@corp.test> [IT]"
    assert Recipient(email="dan@corp.test").choice_label() == "dan@corp.test"


def test_recipient_list_uses_backend_field_names():
    result = RecipientList.model_validate({"list": [{"email": "a@b.com"}], "allDepts": ["RD"]})

    assert result.recipients[0].email == "a@b.com"
    assert result.recipients[0].active is False
    assert result.all_depts == ["RD"]


@pytest.mark.parametrize("blank", [None, ""])
def test_blank_spreadsheet_cells_fall_back_to_defaults(blank):
    result = RecipientList.model_validate({
        "list": [
            {"name": blank, "email": "a@b.com", "active": blank},
            {"name": "No Mail", "email": blank, "active": True},
        ],
    })

    first, second = result.recipients
    assert (first.name, first.email, first.active) == ("", "a@b.com", False)
    assert second.email == ""


def test_numeric_department_labels_become_strings():
    result = RecipientList.model_validate({"list": [], "allDepts": [101, "RD", None, ""]})

    assert result.all_depts == ["101", "RD"]
