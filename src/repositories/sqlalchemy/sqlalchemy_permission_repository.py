from typing import Iterable, List, Optional, Tuple
from sqlalchemy.orm import Session
from src.database import models
from src.repositories.interfaces import IPermissionRepository
from src.schemas import PageRequest, PermissionQuery

class SqlalchemyPermissionRepository(IPermissionRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def page_fetch_by(self, page: PageRequest, query: PermissionQuery) -> Tuple[List[models.Permission], int]:
        q = self.db.query(models.Permission)
        if query.permission_id_list is not None:
            q = q.filter(models.Permission.id.in_(query.permission_id_list))
        if query.code:
            q = q.filter(models.Permission.code == query.code)
        if query.name:
            q = q.filter(models.Permission.name.contains(query.name, autoescape=True))
        total = q.count()
        permissions = q.order_by(models.Permission.id.asc()).offset(page.offset).limit(page.size).all()
        return permissions, total

    def find_by_id(self, permission_id: int) -> Optional[models.Permission]:
        return self.db.query(models.Permission).filter(models.Permission.id == permission_id).first()

    def find_by_ids(self, permission_ids: Iterable[int]) -> List[models.Permission]:
        return (
            self.db.query(models.Permission)
            .filter(models.Permission.id.in_(list(permission_ids)))
            .order_by(models.Permission.id.asc())
            .all()
        )
