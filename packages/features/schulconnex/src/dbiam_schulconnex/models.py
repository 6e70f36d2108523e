"""Error payloads returned to SchulConnex clients."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from dbiam_core.domain.value_object import ValueObject


class SchulConnexError(ValueObject):
    """``{statusCode, subcode, title, description}`` as defined by SchulConnex."""

    status_code: int = Field(alias="statusCode")
    subcode: str
    title: str
    description: str

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class DbiamSpecificationError(ValueObject):
    """Error payload for a violated domain rule, keyed for translation."""

    code: int
    i18n_key: str = Field(alias="i18nKey")
    titel: str
    beschreibung: str

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
