from typing import NamedTuple, Optional


class RolePermissionRow(NamedTuple):
    """역할 LEFT JOIN 권한 결과의 한 행. 권한이 없는 역할은 permission_* 가 모두 None인 한 행을 가집니다."""
    role_id: int
    role_code: str
    role_name: str
    permission_id: Optional[int]
    permission_code: Optional[str]
    permission_name: Optional[str]


class UserRolePermissionRow(NamedTuple):
    """사용자 LEFT JOIN 역할 LEFT JOIN 권한 결과의 한 행."""
    user_id: int
    username: str
    display_name: Optional[str]
    role_id: Optional[int]
    role_code: Optional[str]
    role_name: Optional[str]
    permission_id: Optional[int]
    permission_code: Optional[str]
    permission_name: Optional[str]
