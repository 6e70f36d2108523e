"""PydanticValidator: leverages Pydantic model validation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pydantic import BaseModel


class PydanticValidator:
    """Validates raw input against a pydantic model class.

    Every pydantic error becomes one entry keyed by its dotted location
    (``"geburt.datum"``) with the pydantic error type as constraint name
    (``"date_from_datetime_parsing"``).
    """

    def __init__(self, model_cls: type[BaseModel]) -> None:
        self._model_cls = model_cls

    def validate(self, data: Mapping[str, Any]) -> ValidationResult:
        try:
            self._model_cls.model_validate(dict(data))
            return ValidationResult.success()
        except PydanticValidationError as exc:
            errors: dict[str, list[str]] = {}
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ("__root__",)))
                errors.setdefault(loc or "__root__", []).append(
                    error.get("type", "value_error")
                )
            return ValidationResult.failure(errors)
