from enum import Enum
from typing import Dict


class RoleModule(Enum):
    """시스템에 미리 정의된 역할 모듈의 닫힌 집합."""
    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    OPERATOR = "OPERATOR"
    AUDITOR = "AUDITOR"
    MEMBER = "MEMBER"


# 역할 모듈 -> roles.code 매핑. 코드 문자열은 DB 행과 연결되므로 변경하면 안 됩니다.
ROLE_MODULE_CODES: Dict[RoleModule, str] = {
    RoleModule.SUPER_ADMIN: "SUPER_ADMIN",
    RoleModule.ADMIN: "ADMIN",
    RoleModule.OPERATOR: "OPERATOR",
    RoleModule.AUDITOR: "AUDITOR",
    RoleModule.MEMBER: "MEMBER",
}

# 초기화 시 roles.name으로 사용할 표시 이름
ROLE_MODULE_NAMES: Dict[RoleModule, str] = {
    RoleModule.SUPER_ADMIN: "Super Administrator",
    RoleModule.ADMIN: "Administrator",
    RoleModule.OPERATOR: "Operator",
    RoleModule.AUDITOR: "Auditor",
    RoleModule.MEMBER: "Member",
}


def role_module_code(module: RoleModule) -> str:
    """역할 모듈의 고정 코드 문자열을 반환합니다."""
    return ROLE_MODULE_CODES[module]
