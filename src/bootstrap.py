# src/bootstrap.py
from dataclasses import dataclass

from sqlalchemy.orm import Session

from src.repositories.sqlalchemy.sqlalchemy_user_repository import SqlalchemyUserRepository
from src.repositories.sqlalchemy.sqlalchemy_role_repository import SqlalchemyRoleRepository
from src.repositories.sqlalchemy.sqlalchemy_permission_repository import SqlalchemyPermissionRepository
from src.repositories.sqlalchemy.sqlalchemy_binding_repository import (
    SqlalchemyUserRoleRepository, SqlalchemyRolePermissionRepository
)
from src.repositories.sqlalchemy.sqlalchemy_unit_of_work import SqlalchemyUnitOfWork
from src.services.rbac_query_service import RbacQueryService
from src.services.rbac_binding_service import RbacBindingService


@dataclass
class RbacServices:
    query: RbacQueryService
    binding: RbacBindingService


def build_rbac_services(db_session: Session) -> RbacServices:
    """하나의 세션을 공유하는 리포지토리들을 만들고, 이를 주입한 서비스들을 반환합니다."""
    # 1. 의존성 생성 (Repositories -> Services)
    user_repo = SqlalchemyUserRepository(db_session)
    role_repo = SqlalchemyRoleRepository(db_session)
    permission_repo = SqlalchemyPermissionRepository(db_session)
    user_role_repo = SqlalchemyUserRoleRepository(db_session)
    role_permission_repo = SqlalchemyRolePermissionRepository(db_session)
    uow = SqlalchemyUnitOfWork(db_session)

    return RbacServices(
        query=RbacQueryService(user_repo, role_repo, permission_repo, user_role_repo, role_permission_repo),
        binding=RbacBindingService(user_repo, role_repo, permission_repo, user_role_repo, role_permission_repo, uow),
    )
