"""
Shared pieces for request schemas.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from portfolio_api.core.query import ABSENT, Value

_FALSEY = {"", "0", "false"}


def parse_flag(value: Any) -> bool:
    # "false" counts as false, unlike bool("false").
    if isinstance(value, str):
        return value.strip().lower() not in _FALSEY
    return bool(value)


def parse_flag_if_set(value: Any) -> bool | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_flag(value)


Flag = Annotated[bool, BeforeValidator(parse_flag)]
OptionalFlag = Annotated[bool | None, BeforeValidator(parse_flag_if_set)]
Text = Annotated[str, Field(min_length=1)]


def _reject_empty(value: Any) -> Any:
    # Checked before stripping: "   " is accepted and strips to "".
    if value == "":
        raise ValueError("Value must not be empty.")
    return value


# Comma-separated tag names.
TagList = Annotated[str, BeforeValidator(_reject_empty)]


class Form(BaseModel):
    """Base request body: surrounding whitespace is stripped from strings."""

    model_config = ConfigDict(str_strip_whitespace=True)

    def provided(self, name: str) -> Value:
        """
        The submitted value of `name`, or ABSENT when it was omitted or null.
        """
        if name not in self.model_fields_set:
            return ABSENT
        value = getattr(self, name)
        return ABSENT if value is None else value
