"""dbiam-schulconnex: SchulConnex error vocabulary for domain results."""

from .mapper import (
    BAD_REQUEST,
    INTERNAL_SERVER_ERROR,
    map_domain_error,
    map_validation_result,
)
from .models import DbiamSpecificationError, SchulConnexError
from .specification_errors import SPECIFICATION_ERRORS, map_specification_error

__all__ = [
    "BAD_REQUEST",
    "INTERNAL_SERVER_ERROR",
    "SPECIFICATION_ERRORS",
    "DbiamSpecificationError",
    "SchulConnexError",
    "map_domain_error",
    "map_specification_error",
    "map_validation_result",
]
