# frontend/app/schemas.py
# pydantic models for the data exchanged with the Apps Script endpoint and for the order form.

import datetime
import re
from typing import Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from .errors import FormValidationError

# Value used by the department dropdown for "no department filter".
# The dropdown cannot hold an empty value, so a non-empty placeholder is used instead.
DEPT_ALL_VALUE = "ALL"

REQUIRED_MESSAGE = "必填"
INVALID_URL_MESSAGE = "需要有效網址"

_url_adapter = TypeAdapter(AnyUrl)

# Zero-width space and byte-order mark, both common in links pasted from chat apps.
INVISIBLE_CHARS = re.compile("[\u200b\ufeff]")


class Recipient(BaseModel):
    """One entry of the spreadsheet-backed mailing list. `email` is the unique key."""

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    name: str = ""
    email: str = ""
    dept: Optional[str] = None
    active: bool = False
    note: Optional[str] = None

    @field_validator("name", "email", "active", mode="before")
    @classmethod
    def _blank_cell_as_default(cls, value, info):
        # Apps Script hands blank spreadsheet cells over as "" or null.
        if value is None or value == "":
            return cls.model_fields[info.field_name].default
        return value

    def choice_label(self) -> str:
        label = f"{self.name} <{self.email}>" if self.name else self.email
        return f"{label} [{self.dept}]" if self.dept else label


class RecipientList(BaseModel):
    """The `getRecipients` response body."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    recipients: list[Recipient] = Field(default_factory=list, alias="list")
    all_depts: list[str] = Field(default_factory=list, alias="allDepts")

    @field_validator("recipients", "all_depts", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("all_depts", mode="after")
    @classmethod
    def _depts_as_labels(cls, value: list[str]) -> list[str]:
        return [d for d in value if d]

    @field_validator("all_depts", mode="before")
    @classmethod
    def _numbers_as_labels(cls, value):
        if isinstance(value, list):
            return ["" if d is None else str(d) for d in value]
        return value


class DrinkOrderForm(BaseModel):
    vendor: str = Field(min_length=1)
    link: str
    deadline: datetime.datetime
    note: Optional[str] = None

    @field_validator("link")
    @classmethod
    def _must_be_url(cls, value: str) -> str:
        # Kept as the raw string; sanitize_link() runs later, right before the payload is built.
        _url_adapter.validate_python(value)
        return value


def _message_for(field: str) -> str:
    return INVALID_URL_MESSAGE if field == "link" else REQUIRED_MESSAGE


def validate_form(vendor, link, deadline, note=None) -> DrinkOrderForm:
    """
    Validates the organizer-entered fields.
    Raises FormValidationError with one message per offending field.
    """
    try:
        return DrinkOrderForm(vendor=vendor or "", link=link or "", deadline=deadline, note=note)
    except ValidationError as e:
        field_errors = {}
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "__root__"
            field_errors.setdefault(field, _message_for(field))
        raise FormValidationError(field_errors) from e


def sanitize_link(raw: str | None) -> str:
    """Strips zero-width spaces and BOMs, turns ideographic spaces into plain spaces, then trims."""
    return INVISIBLE_CHARS.sub("", raw or "").replace("\u3000", " ").strip()
