from .rows import RolePermissionRow, UserRolePermissionRow
from .user import IUserRepository
from .role import IRoleRepository
from .permission import IPermissionRepository
from .binding import IUserRoleRepository, IRolePermissionRepository
from .unit_of_work import IUnitOfWork

__all__ = [
    "RolePermissionRow", "UserRolePermissionRow",
    "IUserRepository", "IRoleRepository", "IPermissionRepository",
    "IUserRoleRepository", "IRolePermissionRepository", "IUnitOfWork",
]
