from .user import User
from .role import Role
from .permission import Permission
from .association import UserRole, RolePermission
from .role_module import RoleModule, ROLE_MODULE_CODES, ROLE_MODULE_NAMES, role_module_code

__all__ = [
    "User", "Role", "Permission", "UserRole", "RolePermission",
    "RoleModule", "ROLE_MODULE_CODES", "ROLE_MODULE_NAMES", "role_module_code",
]
