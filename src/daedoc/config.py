"""Rendering options."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "DAEDOC_"


class RenderOptions(BaseModel):
    """Knobs for the Markdown renderer.

    The admonition keyword, code fence language and section labels are part
    of the output contract and are not configurable.
    """

    model_config = {"frozen": True}

    indent: str = Field(default="\t", min_length=1)
    return_lead_in: str | None = None
    param_style: Literal["name", "signature"] = "name"

    @field_validator("indent", mode="before")
    @classmethod
    def _expand_indent(cls, value):
        # "tab" or a number of spaces, as accepted on the command line
        if value == "tab":
            return "\t"
        if isinstance(value, str) and value.isdigit():
            return " " * int(value)
        return value

    @field_validator("indent")
    @classmethod
    def _indent_is_whitespace(cls, value: str) -> str:
        if value.strip():
            raise ValueError("indent must contain only whitespace")
        return value

    @field_validator("return_lead_in")
    @classmethod
    def _blank_lead_in_is_none(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            return None
        return value

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides
    ) -> RenderOptions:
        """Build options from DAEDOC_* variables, then apply non-None overrides.

        Raises:
            pydantic.ValidationError: If a value is invalid.
        """
        if environ is None:
            environ = os.environ

        values: dict[str, object] = {}
        for name in cls.model_fields:
            key = ENV_PREFIX + name.upper()
            if key in environ:
                values[name] = environ[key]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
