from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import IUserRepository, UserRolePermissionRow
from src.schemas import PageRequest, UserQuery

class SqlalchemyUserRepository(IUserRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def page_fetch_by(self, page: PageRequest, query: UserQuery) -> Tuple[List[models.User], int]:
        q = self.db.query(models.User)
        if query.username:
            q = q.filter(models.User.username.contains(query.username, autoescape=True))
        total = q.count()
        users = q.order_by(models.User.id.asc()).offset(page.offset).limit(page.size).all()
        return users, total

    def find_by_id(self, user_id: int) -> Optional[models.User]:
        return self.db.query(models.User).filter(models.User.id == user_id).first()

    def fetch_with_roles_and_permissions(self, user_id: int) -> List[UserRolePermissionRow]:
        rows = (
            self.db.query(
                models.User.id,
                models.User.username,
                models.User.display_name,
                models.Role.id,
                models.Role.code,
                models.Role.name,
                models.Permission.id,
                models.Permission.code,
                models.Permission.name,
            )
            .select_from(models.User)
            .outerjoin(models.UserRole, models.UserRole.user_id == models.User.id)
            .outerjoin(models.Role, models.Role.id == models.UserRole.role_id)
            .outerjoin(models.RolePermission, models.RolePermission.role_id == models.Role.id)
            .outerjoin(models.Permission, models.Permission.id == models.RolePermission.permission_id)
            .filter(models.User.id == user_id)
            .order_by(models.Role.id.asc(), models.Permission.id.asc())
            .all()
        )
        return [UserRolePermissionRow(*row) for row in rows]
