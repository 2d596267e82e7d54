"""RBAC 조회/바인딩에 사용되는 요청 및 응답 구조."""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.config import get_settings

T = TypeVar("T")


class BaseSchema(BaseModel):
    """기본 구조. ORM 객체로부터의 매핑을 허용합니다."""

    model_config = ConfigDict(from_attributes=True)


# ===================================================================
#  페이지네이션
# ===================================================================

class PageRequest(BaseSchema):
    """페이지 요청. page는 1부터 시작합니다."""

    page: int = Field(default=1, ge=1)
    size: int = Field(default_factory=lambda: get_settings().default_page_size, ge=1)

    @model_validator(mode="after")
    def check_size_limit(self) -> "PageRequest":
        max_size = get_settings().max_page_size
        if self.size > max_size:
            raise ValueError(f"size must be less than or equal to {max_size}")
        return self

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


class Page(BaseSchema, Generic[T]):
    """페이지 응답. 빈 결과도 항상 total=0, items=[]로 표현됩니다."""

    total: int = 0
    items: List[T] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "Page[T]":
        return cls(total=0, items=[])


# ===================================================================
#  응답 DTO
# ===================================================================

class PermissionDto(BaseSchema):
    id: int
    code: str
    name: str


class RoleWithPermissions(BaseSchema):
    """역할과 해당 역할에 바인딩된 모든 권한."""

    id: int
    code: str
    name: str
    permissions: List[PermissionDto] = Field(default_factory=list)


class UserWithRolesAndPermissions(BaseSchema):
    """사용자 -> 역할 -> 권한으로 이어지는 중첩 조회 결과."""

    id: int
    username: str
    display_name: Optional[str] = None
    roles: List[RoleWithPermissions] = Field(default_factory=list)


# ===================================================================
#  조회 필터
# ===================================================================

class UserQuery(BaseSchema):
    username: Optional[str] = Field(default=None, description="사용자 이름 부분 일치.")


class RoleQuery(BaseSchema):
    user_id: Optional[int] = Field(default=None, description="이 사용자에게 바인딩된 역할만 조회.")
    role_id_list: Optional[List[int]] = None
    code: Optional[str] = Field(default=None, description="역할 코드 완전 일치.")
    name: Optional[str] = Field(default=None, description="역할 이름 부분 일치.")


class PermissionQuery(BaseSchema):
    role_id: Optional[int] = Field(default=None, description="이 역할에 바인딩된 권한만 조회.")
    permission_id_list: Optional[List[int]] = None
    code: Optional[str] = Field(default=None, description="권한 코드 완전 일치.")
    name: Optional[str] = Field(default=None, description="권한 이름 부분 일치.")
