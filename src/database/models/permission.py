from sqlalchemy import Column, Integer, String
from ..database import Base

class Permission(Base):
    """
    역할에 부여할 수 있는 단일 권한을 정의합니다. (예: 'user:read').
    """
    __tablename__ = "permissions"
    id = Column(Integer, primary_key=True, index=True)
    code = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
