from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple
from src.database import models
from src.schemas import PageRequest, RoleQuery
from .rows import RolePermissionRow

class IRoleRepository(ABC):
    @abstractmethod
    def page_fetch_by(self, page: PageRequest, query: RoleQuery) -> Tuple[List[models.Role], int]:
        """필터 조건에 맞는 역할 한 페이지와 전체 개수를 조회합니다."""
        pass

    @abstractmethod
    def find_by_id(self, role_id: int) -> Optional[models.Role]:
        """고유 ID로 특정 역할을 조회합니다."""
        pass

    @abstractmethod
    def find_by_ids(self, role_ids: Iterable[int]) -> List[models.Role]:
        """ID 목록 중 실제로 존재하는 역할들을 조회합니다."""
        pass

    @abstractmethod
    def find_by_codes(self, codes: Iterable[str]) -> List[models.Role]:
        """코드 목록 중 실제로 존재하는 역할들을 조회합니다."""
        pass

    @abstractmethod
    def fetch_with_permissions(self, role_id: int) -> List[RolePermissionRow]:
        """
        역할과 그 역할의 모든 권한을 하나의 결과 집합(LEFT JOIN)으로 조회합니다.
        역할이 없으면 빈 리스트를 반환합니다.
        """
        pass
