"""Heyflow webhook payload parsing."""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

HANDSHAKE_MESSAGE = "Heyflow Webhook API successfully initialized"


class FormValue(BaseModel):
    model_config = ConfigDict(extra="ignore")

    label: str


class FormField(BaseModel):
    """One answered question. Only the first value is used."""
    model_config = ConfigDict(extra="ignore")

    label: str
    values: list[FormValue] = Field(min_length=1)


class HeyflowPayload(BaseModel):
    """Webhook body sent by Heyflow.

    Either a form submission (``fields``) or the initialization handshake
    (``message``). Anything unexpected degrades to the defaults instead of
    failing the request.
    """
    model_config = ConfigDict(extra="ignore")

    form_fields: list[FormField] = Field(default_factory=list, alias="fields")
    message: str | None = None

    @field_validator("form_fields", mode="before")
    @classmethod
    def _keep_wellformed_fields(cls, v: Any) -> list:
        if not isinstance(v, list):
            return []
        kept = []
        for entry in v:
            try:
                kept.append(FormField.model_validate(entry))
            except ValidationError:
                logger.warning(f"Skipping malformed form field: {entry!r}")
        return kept

    @field_validator("message", mode="before")
    @classmethod
    def _message_as_str(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None

    @classmethod
    def from_body(cls, body: Any) -> "HeyflowPayload":
        if not isinstance(body, dict):
            return cls()
        return cls.model_validate(body)

    @property
    def is_handshake(self) -> bool:
        return self.message is not None and HANDSHAKE_MESSAGE in self.message


class Submission:
    """Flat view of a form submission: lowercase field label -> value."""

    def __init__(self, props: dict[str, str] | None = None):
        self.props: dict[str, str] = dict(props or {})

    @classmethod
    def parse(cls, body: Any) -> "Submission":
        payload = body if isinstance(body, HeyflowPayload) else HeyflowPayload.from_body(body)
        props: dict[str, str] = {}
        for field in payload.form_fields:
            props[field.label.lower()] = field.values[0].label
        return cls(props)

    @property
    def is_valid(self) -> bool:
        return isinstance(self.props.get("name"), str)

    def __len__(self) -> int:
        return len(self.props)

    def __repr__(self) -> str:
        return f"Submission({self.props!r})"
