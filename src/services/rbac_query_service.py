import logging
from typing import List, Optional

from src.repositories.interfaces import (
    IUserRepository, IRoleRepository, IPermissionRepository,
    IUserRoleRepository, IRolePermissionRepository
)
from src.schemas import (
    Page, PageRequest, PermissionDto, PermissionQuery, RoleQuery, RoleWithPermissions,
    UserQuery, UserWithRolesAndPermissions
)
from src.services.rbac_assembler import assemble_role, assemble_user

logger = logging.getLogger(__name__)

class RbacQueryService:
    """사용자, 역할, 권한의 페이지 조회와 중첩(사용자 -> 역할 -> 권한) 조회를 제공합니다."""

    def __init__(
        self,
        user_repo: IUserRepository,
        role_repo: IRoleRepository,
        permission_repo: IPermissionRepository,
        user_role_repo: IUserRoleRepository,
        role_permission_repo: IRolePermissionRepository,
    ):
        """
        RbacQueryService를 초기화합니다.

        Args:
            user_repo: 사용자 데이터에 접근하기 위한 리포지토리.
            role_repo: 역할 데이터에 접근하기 위한 리포지토리.
            permission_repo: 권한 데이터에 접근하기 위한 리포지토리.
            user_role_repo: 사용자-역할 매핑 리포지토리 (사용자별 역할 필터링용).
            role_permission_repo: 역할-권한 매핑 리포지토리 (역할별 권한 필터링용).
        """
        self.user_repo = user_repo
        self.role_repo = role_repo
        self.permission_repo = permission_repo
        self.user_role_repo = user_role_repo
        self.role_permission_repo = role_permission_repo

    def page_query_users(self, page: PageRequest, query: UserQuery) -> Page[UserWithRolesAndPermissions]:
        """
        사용자 한 페이지를 조회하고, 각 사용자마다 역할과 권한을 중첩하여 채웁니다.

        Returns:
            결과가 없으면 total=0, items=[]인 빈 페이지.
        """
        users, total = self.user_repo.page_fetch_by(page, query)
        if not users:
            return Page[UserWithRolesAndPermissions].empty()

        items: List[UserWithRolesAndPermissions] = []
        for user in users:
            view = self.query_user_with_roles_and_permissions(user.id)
            # 페이지 조회와 중첩 조회 사이에 삭제된 사용자는 결과에서 제외합니다.
            if view is not None:
                items.append(view)
        return Page[UserWithRolesAndPermissions](total=total, items=items)

    def query_user_with_roles_and_permissions(self, user_id: int) -> Optional[UserWithRolesAndPermissions]:
        """사용자의 중첩 뷰를 조회합니다. 사용자가 없으면 None을 반환합니다."""
        rows = self.user_repo.fetch_with_roles_and_permissions(user_id)
        return assemble_user(rows)

    def page_query_roles(self, page: PageRequest, query: RoleQuery) -> Page[RoleWithPermissions]:
        """
        역할 한 페이지를 조회합니다. query.user_id가 있으면 해당 사용자에게 바인딩된 역할로 한정합니다.

        Returns:
            사용자에게 바인딩된 역할이 없거나 결과가 없으면 빈 페이지.
        """
        if query.user_id is not None:
            role_ids = [binding.role_id for binding in self.user_role_repo.find_by_user_id(query.user_id)]
            if not role_ids:
                # "id IN ()" 조건으로 역할 테이블을 조회하지 않습니다.
                return Page[RoleWithPermissions].empty()
            query = query.model_copy(update={"role_id_list": role_ids})

        roles, total = self.role_repo.page_fetch_by(page, query)
        if not roles:
            return Page[RoleWithPermissions].empty()

        items: List[RoleWithPermissions] = []
        for role in roles:
            view = self.query_role_with_permissions(role.id)
            if view is not None:
                items.append(view)
        return Page[RoleWithPermissions](total=total, items=items)

    def query_role_with_permissions(self, role_id: int) -> Optional[RoleWithPermissions]:
        """역할과 바인딩된 모든 권한을 조회합니다. 역할이 없으면 None을 반환합니다."""
        rows = self.role_repo.fetch_with_permissions(role_id)
        return assemble_role(rows)

    def page_query_permissions(self, page: PageRequest, query: PermissionQuery) -> Page[PermissionDto]:
        """
        권한 한 페이지를 조회합니다. query.role_id가 있으면 해당 역할에 바인딩된 권한으로 한정합니다.
        """
        if query.role_id is not None:
            permission_ids = [binding.permission_id for binding in self.role_permission_repo.find_by_role_id(query.role_id)]
            if not permission_ids:
                return Page[PermissionDto].empty()
            query = query.model_copy(update={"permission_id_list": permission_ids})

        permissions, total = self.permission_repo.page_fetch_by(page, query)
        if not permissions:
            return Page[PermissionDto].empty()
        return Page[PermissionDto](
            total=total,
            items=[PermissionDto.model_validate(p) for p in permissions],
        )
