from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple
from src.database import models
from src.schemas import PageRequest, PermissionQuery

class IPermissionRepository(ABC):
    @abstractmethod
    def page_fetch_by(self, page: PageRequest, query: PermissionQuery) -> Tuple[List[models.Permission], int]:
        """필터 조건에 맞는 권한 한 페이지와 전체 개수를 조회합니다."""
        pass

    @abstractmethod
    def find_by_id(self, permission_id: int) -> Optional[models.Permission]:
        """고유 ID로 특정 권한을 조회합니다."""
        pass

    @abstractmethod
    def find_by_ids(self, permission_ids: Iterable[int]) -> List[models.Permission]:
        """ID 목록 중 실제로 존재하는 권한들을 조회합니다."""
        pass
