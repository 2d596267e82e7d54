from sqlalchemy import Column, Integer, String
from ..database import Base

class Role(Base):
    """
    권한(Permission)의 묶음을 정의합니다. (예: 'ADMIN', 'AUDITOR').
    code는 조회에 사용되는 고정 식별자이며, name은 표시용 이름입니다.
    """
    __tablename__ = "roles"
    id = Column(Integer, primary_key=True, index=True)
    code = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
