from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.database import models
from src.schemas import PageRequest, UserQuery
from .rows import UserRolePermissionRow

class IUserRepository(ABC):
    @abstractmethod
    def page_fetch_by(self, page: PageRequest, query: UserQuery) -> Tuple[List[models.User], int]:
        """필터 조건에 맞는 사용자 한 페이지와 전체 개수를 조회합니다."""
        pass

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[models.User]:
        """고유 ID로 특정 사용자를 조회합니다."""
        pass

    @abstractmethod
    def fetch_with_roles_and_permissions(self, user_id: int) -> List[UserRolePermissionRow]:
        """
        사용자와 그 사용자의 모든 역할, 각 역할의 모든 권한을 하나의 결과 집합으로 조회합니다.

        Returns:
            (사용자, 역할, 권한) 조합마다 한 행. 사용자가 없으면 빈 리스트.
            역할 또는 권한이 없는 경우 해당 컬럼이 None인 행이 포함됩니다.
        """
        pass
