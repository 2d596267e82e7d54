from typing import List
from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import IUserRoleRepository, IRolePermissionRepository

class SqlalchemyUserRoleRepository(IUserRoleRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def find_by_user_id(self, user_id: int) -> List[models.UserRole]:
        return self.db.query(models.UserRole).filter(models.UserRole.user_id == user_id).order_by(models.UserRole.role_id.asc()).all()

    def delete_by_user_id(self, user_id: int) -> int:
        return self.db.query(models.UserRole).filter(models.UserRole.user_id == user_id).delete(synchronize_session="fetch")

    def bulk_insert(self, bindings: List[models.UserRole]) -> None:
        self.db.add_all(bindings)
        self.db.flush()


class SqlalchemyRolePermissionRepository(IRolePermissionRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def find_by_role_id(self, role_id: int) -> List[models.RolePermission]:
        return self.db.query(models.RolePermission).filter(models.RolePermission.role_id == role_id).order_by(models.RolePermission.permission_id.asc()).all()

    def delete_by_role_id(self, role_id: int) -> int:
        return self.db.query(models.RolePermission).filter(models.RolePermission.role_id == role_id).delete(synchronize_session="fetch")

    def bulk_insert(self, bindings: List[models.RolePermission]) -> None:
        self.db.add_all(bindings)
        self.db.flush()
