from .aggregate import Personenkontext
from .rules import (
    AssignmentCountMatches,
    AssignmentsNotOutdated,
    OnlyTeachersAndLearnersAtClass,
    PersonIdsMatch,
    SameRoleAtClassAsSchool,
)
from .scope import PersonenkontextScope
from .service import PersonenkontextService
from .update import PersonenkontexteUpdate

__all__ = [
    "AssignmentCountMatches",
    "AssignmentsNotOutdated",
    "OnlyTeachersAndLearnersAtClass",
    "PersonIdsMatch",
    "Personenkontext",
    "PersonenkontextScope",
    "PersonenkontextService",
    "PersonenkontexteUpdate",
    "SameRoleAtClassAsSchool",
]
