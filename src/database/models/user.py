from sqlalchemy import Column, Integer, String, DateTime, func
from ..database import Base

class User(Base):
    """
    역할(Role)을 부여받는 시스템 사용자를 나타냅니다.
    사용자는 user_role_map을 통해 0개 이상의 역할에 바인딩됩니다.
    """
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False, index=True)
    display_name = Column(String)
    created_at = Column(DateTime, server_default=func.now())
