from .aggregate import Rolle, RollenArt, RollenMerkmal, RollenSystemRecht
from .rules import RoleNameWithoutSurroundingSpace
from .scope import RolleScope
from .service import RolleService

__all__ = [
    "RoleNameWithoutSurroundingSpace",
    "Rolle",
    "RolleScope",
    "RolleService",
    "RollenArt",
    "RollenMerkmal",
    "RollenSystemRecht",
]
