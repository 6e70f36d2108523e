from .paging import Counted, Paged
from .query_scope import IQueryScope
from .repository import IRepository, IScopeStore
from .unit_of_work import UnitOfWork

__all__ = [
    "Counted",
    "IQueryScope",
    "IRepository",
    "IScopeStore",
    "Paged",
    "UnitOfWork",
]
