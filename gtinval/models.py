# gtinval/models.py
from __future__ import annotations

from pydantic import BaseModel, ValidationInfo, field_validator

from gtinval.errors import FixError
from gtinval.validators import FIXERS, Variant


class CodeEntry(BaseModel):
    """A product code normalized for the GTIN variant it claims to be."""

    variant: Variant = 13
    gtin: str

    @field_validator("gtin")
    @classmethod
    def validate_gtin(cls, v: str, info: ValidationInfo) -> str:
        variant = info.data.get("variant")
        if variant is None:  # variant itself failed validation
            return v
        return FIXERS[variant](v)


def describe_error(err: dict) -> str:
    """One entry of ValidationError.errors() as "Kind: detail" for code failures."""
    cause = err.get("ctx", {}).get("error")
    if isinstance(cause, FixError):
        return f"{cause.kind}: {cause}"
    return err["msg"]
