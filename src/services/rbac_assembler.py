"""
LEFT JOIN으로 평탄화된 결과 행을 중첩 DTO로 조립합니다.

소유자(역할/사용자) 필드는 첫 행에서 한 번만 읽고, 자식은 ID 기준으로
처음 등장한 순서대로 묶습니다. 자식 ID가 None인 행은 "자식 없음"을 뜻하므로 건너뜁니다.
"""
from typing import Dict, List, Optional, Sequence

from src.repositories.interfaces import RolePermissionRow, UserRolePermissionRow
from src.schemas import PermissionDto, RoleWithPermissions, UserWithRolesAndPermissions


def _append_permission(role: RoleWithPermissions, seen: set, permission_id: Optional[int], code: Optional[str], name: Optional[str]) -> None:
    if permission_id is None or permission_id in seen:
        return
    seen.add(permission_id)
    role.permissions.append(PermissionDto(id=permission_id, code=code, name=name))


def assemble_role(rows: Sequence[RolePermissionRow]) -> Optional[RoleWithPermissions]:
    """한 역할의 결과 행들로 RoleWithPermissions를 만듭니다. 행이 없으면 None."""
    if not rows:
        return None
    first = rows[0]
    role = RoleWithPermissions(id=first.role_id, code=first.role_code, name=first.role_name)
    seen = set()
    for row in rows:
        _append_permission(role, seen, row.permission_id, row.permission_code, row.permission_name)
    return role


def assemble_user(rows: Sequence[UserRolePermissionRow]) -> Optional[UserWithRolesAndPermissions]:
    """한 사용자의 결과 행들로 UserWithRolesAndPermissions를 만듭니다. 행이 없으면 None."""
    if not rows:
        return None
    first = rows[0]
    user = UserWithRolesAndPermissions(id=first.user_id, username=first.username, display_name=first.display_name)

    # dict는 삽입 순서를 유지하므로 역할은 처음 등장한 순서를 따릅니다.
    roles: Dict[int, RoleWithPermissions] = {}
    seen_permissions: Dict[int, set] = {}
    for row in rows:
        if row.role_id is None:
            continue
        role = roles.get(row.role_id)
        if role is None:
            role = RoleWithPermissions(id=row.role_id, code=row.role_code, name=row.role_name)
            roles[row.role_id] = role
            seen_permissions[row.role_id] = set()
        _append_permission(role, seen_permissions[row.role_id], row.permission_id, row.permission_code, row.permission_name)

    user.roles = list(roles.values())
    return user
