from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from src.config import get_settings


def build_engine(database_url: str, echo: bool = False, **kwargs):
    """연결 문자열로 SQLAlchemy 엔진을 생성합니다. SQLite는 외래 키 검사를 켭니다."""
    is_sqlite = database_url.startswith("sqlite")
    # check_same_thread는 SQLite에서만 필요합니다.
    connect_args = {"check_same_thread": False} if is_sqlite else {}
    engine = create_engine(database_url, echo=echo, connect_args=connect_args, **kwargs)

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


_settings = get_settings()

engine = build_engine(_settings.database_url, echo=_settings.database_echo)

# autocommit=False, autoflush=False: 커밋은 작업 단위(IUnitOfWork)가 명시적으로 수행합니다.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 모든 모델 클래스가 상속받을 Base 클래스
Base = declarative_base()
