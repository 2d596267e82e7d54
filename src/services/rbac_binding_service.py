import logging
from typing import Iterable, List, Optional

from src.database import models
from src.database.models import RoleModule, role_module_code
from src.repositories.interfaces import (
    IUserRepository, IRoleRepository, IPermissionRepository,
    IUserRoleRepository, IRolePermissionRepository, IUnitOfWork
)
from src.services.exceptions import BindOwnerNotFoundError, BindTargetNotFoundError

logger = logging.getLogger(__name__)

class RbacBindingService:
    """
    소유자(사용자 또는 역할)의 바인딩 집합을 통째로 교체합니다.

    모든 바인딩 작업은 "소유자 존재 확인 -> 기존 바인딩 삭제 -> 대상 존재 확인 -> 일괄 추가"를
    하나의 트랜잭션으로 수행합니다. 소유자가 없으면 BindOwnerNotFoundError, 대상이 하나도
    존재하지 않으면 BindTargetNotFoundError가 발생하며 삭제까지 롤백됩니다.
    요청한 ID 중 일부만 존재하면 존재하는 대상만 바인딩하고 나머지는 무시합니다.
    """

    def __init__(
        self,
        user_repo: IUserRepository,
        role_repo: IRoleRepository,
        permission_repo: IPermissionRepository,
        user_role_repo: IUserRoleRepository,
        role_permission_repo: IRolePermissionRepository,
        uow: IUnitOfWork,
    ):
        self.user_repo = user_repo
        self.role_repo = role_repo
        self.permission_repo = permission_repo
        self.user_role_repo = user_role_repo
        self.role_permission_repo = role_permission_repo
        self.uow = uow

    def bind_permissions_to_role(self, role_id: int, permission_ids: Optional[Iterable[int]]) -> None:
        """
        역할의 권한 바인딩을 permission_ids로 교체합니다.

        Args:
            role_id: 권한을 바인딩할 역할의 ID.
            permission_ids: 바인딩할 권한 ID 목록. 비어있거나 None이면 모든 권한 바인딩을 해제합니다.

        Raises:
            BindOwnerNotFoundError: role_id에 해당하는 역할이 없을 때.
            BindTargetNotFoundError: 목록이 비어있지 않은데 존재하는 권한이 하나도 없을 때.
        """
        permission_ids = list(permission_ids or [])
        with self.uow.transaction():
            if self.role_repo.find_by_id(role_id) is None:
                logger.warning("Role %s does not exist; cannot bind permissions", role_id)
                raise BindOwnerNotFoundError("bind role not exist")

            self.role_permission_repo.delete_by_role_id(role_id)
            if not permission_ids:
                logger.info("Cleared all permissions of role %s", role_id)
                return

            permissions = self.permission_repo.find_by_ids(permission_ids)
            if not permissions:
                logger.warning("None of permissions %s exist; cannot bind to role %s", permission_ids, role_id)
                raise BindTargetNotFoundError("bind permission not exist")

            self.role_permission_repo.bulk_insert(
                [models.RolePermission(role_id=role_id, permission_id=p.id) for p in permissions]
            )
            logger.info("Bound %d permission(s) to role %s", len(permissions), role_id)

    def bind_roles_to_user(self, user_id: int, role_ids: Optional[Iterable[int]]) -> None:
        """
        사용자의 역할 바인딩을 role_ids로 교체합니다.

        Raises:
            BindOwnerNotFoundError: user_id에 해당하는 사용자가 없을 때.
            BindTargetNotFoundError: 목록이 비어있지 않은데 존재하는 역할이 하나도 없을 때.
        """
        role_ids = list(role_ids or [])
        with self.uow.transaction():
            if self.user_repo.find_by_id(user_id) is None:
                logger.warning("User %s does not exist; cannot bind roles", user_id)
                raise BindOwnerNotFoundError("bind user not exist")

            self.user_role_repo.delete_by_user_id(user_id)
            if not role_ids:
                logger.info("Cleared all roles of user %s", user_id)
                return

            roles = self.role_repo.find_by_ids(role_ids)
            if not roles:
                logger.warning("None of roles %s exist; cannot bind to user %s", role_ids, user_id)
                raise BindTargetNotFoundError("bind role not exist")

            self.user_role_repo.bulk_insert(
                [models.UserRole(user_id=user_id, role_id=r.id) for r in roles]
            )
            logger.info("Bound %d role(s) to user %s", len(roles), user_id)

    def bind_role_module_to_user(self, user_id: int, role_modules: Optional[Iterable[RoleModule]]) -> None:
        """
        미리 정의된 역할 모듈을 코드로 역할 ID에 대응시킨 뒤 bind_roles_to_user에 위임합니다.
        코드 조회와 바인딩 교체는 하나의 트랜잭션입니다.
        """
        codes: List[str] = [role_module_code(module) for module in (role_modules or [])]
        with self.uow.transaction():
            role_ids = [role.id for role in self.role_repo.find_by_codes(codes)] if codes else []
            self.bind_roles_to_user(user_id, role_ids)
