from abc import ABC, abstractmethod
from typing import List
from src.database import models

class IUserRoleRepository(ABC):
    @abstractmethod
    def find_by_user_id(self, user_id: int) -> List[models.UserRole]:
        """사용자에게 바인딩된 모든 역할 매핑을 조회합니다."""
        pass

    @abstractmethod
    def delete_by_user_id(self, user_id: int) -> int:
        """사용자의 모든 역할 매핑을 삭제하고, 삭제된 행 수를 반환합니다. (커밋하지 않음)"""
        pass

    @abstractmethod
    def bulk_insert(self, bindings: List[models.UserRole]) -> None:
        """역할 매핑을 일괄 추가합니다. (커밋하지 않음)"""
        pass


class IRolePermissionRepository(ABC):
    @abstractmethod
    def find_by_role_id(self, role_id: int) -> List[models.RolePermission]:
        """역할에 바인딩된 모든 권한 매핑을 조회합니다."""
        pass

    @abstractmethod
    def delete_by_role_id(self, role_id: int) -> int:
        """역할의 모든 권한 매핑을 삭제하고, 삭제된 행 수를 반환합니다. (커밋하지 않음)"""
        pass

    @abstractmethod
    def bulk_insert(self, bindings: List[models.RolePermission]) -> None:
        """권한 매핑을 일괄 추가합니다. (커밋하지 않음)"""
        pass
