from .rbac import (
    PageRequest, Page, PermissionDto, RoleWithPermissions, UserWithRolesAndPermissions,
    UserQuery, RoleQuery, PermissionQuery,
)

__all__ = [
    "PageRequest", "Page", "PermissionDto", "RoleWithPermissions", "UserWithRolesAndPermissions",
    "UserQuery", "RoleQuery", "PermissionQuery",
]
