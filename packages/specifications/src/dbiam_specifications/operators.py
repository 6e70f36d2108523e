from enum import Enum


class ScopeOperator(str, Enum):
    """How the predicates inside one filter group are combined."""

    AND = "and"
    OR = "or"


class ScopeOrder(str, Enum):
    """Sort direction of one sort key.

    ``ASC`` places missing values last, ``DESC`` places them first.
    """

    ASC = "asc"
    DESC = "desc"
