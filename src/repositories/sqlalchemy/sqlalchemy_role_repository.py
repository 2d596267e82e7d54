from typing import Iterable, List, Optional, Tuple
from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import IRoleRepository, RolePermissionRow
from src.schemas import PageRequest, RoleQuery

class SqlalchemyRoleRepository(IRoleRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def page_fetch_by(self, page: PageRequest, query: RoleQuery) -> Tuple[List[models.Role], int]:
        q = self.db.query(models.Role)
        if query.role_id_list is not None:
            q = q.filter(models.Role.id.in_(query.role_id_list))
        if query.code:
            q = q.filter(models.Role.code == query.code)
        if query.name:
            q = q.filter(models.Role.name.contains(query.name, autoescape=True))
        total = q.count()
        roles = q.order_by(models.Role.id.asc()).offset(page.offset).limit(page.size).all()
        return roles, total

    def find_by_id(self, role_id: int) -> Optional[models.Role]:
        return self.db.query(models.Role).filter(models.Role.id == role_id).first()

    def find_by_ids(self, role_ids: Iterable[int]) -> List[models.Role]:
        return self.db.query(models.Role).filter(models.Role.id.in_(list(role_ids))).order_by(models.Role.id.asc()).all()

    def find_by_codes(self, codes: Iterable[str]) -> List[models.Role]:
        return self.db.query(models.Role).filter(models.Role.code.in_(list(codes))).order_by(models.Role.id.asc()).all()

    def fetch_with_permissions(self, role_id: int) -> List[RolePermissionRow]:
        rows = (
            self.db.query(
                models.Role.id,
                models.Role.code,
                models.Role.name,
                models.Permission.id,
                models.Permission.code,
                models.Permission.name,
            )
            .select_from(models.Role)
            .outerjoin(models.RolePermission, models.RolePermission.role_id == models.Role.id)
            .outerjoin(models.Permission, models.Permission.id == models.RolePermission.permission_id)
            .filter(models.Role.id == role_id)
            .order_by(models.Permission.id.asc())
            .all()
        )
        return [RolePermissionRow(*row) for row in rows]
