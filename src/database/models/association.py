from sqlalchemy import Column, Integer, ForeignKey
from ..database import Base

class UserRole(Base):
    """
    사용자(User)와 역할(Role) 사이의 다대다 관계를 연결하는 연관 테이블입니다.
    (user_id, role_id) 복합 기본 키로 동일한 쌍이 중복 저장되지 않습니다.
    사용자 쪽이 소유하며, 재바인딩 시 사용자 단위로 통째로 교체됩니다.
    """
    __tablename__ = 'user_role_map'
    user_id = Column(Integer, ForeignKey('users.id'), primary_key=True)
    role_id = Column(Integer, ForeignKey('roles.id'), primary_key=True)


class RolePermission(Base):
    """
    역할(Role)과 권한(Permission) 사이의 다대다 관계를 연결하는 연관 테이블입니다.
    역할 쪽이 소유합니다.
    """
    __tablename__ = 'role_permission_map'
    role_id = Column(Integer, ForeignKey('roles.id'), primary_key=True)
    permission_id = Column(Integer, ForeignKey('permissions.id'), primary_key=True)
