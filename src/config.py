"""애플리케이션 실행 설정."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """RBAC 백엔드 공통 설정. 환경 변수(RBAC_*) 또는 .env 파일에서 읽습니다."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="RBAC_", extra="ignore")

    database_url: str = Field(default="sqlite:///rbac.db", description="데이터베이스 연결 문자열.")
    database_echo: bool = Field(default=False, description="실행되는 SQL을 로그로 출력할지 여부.")
    log_level: str = Field(default="INFO", description="루트 로거 레벨.")
    default_page_size: int = Field(default=10, ge=1, description="페이지 크기 기본값.")
    max_page_size: int = Field(default=100, ge=1, description="허용되는 최대 페이지 크기.")
    seed_admin_username: str = Field(default="admin", description="초기화 시 생성할 관리자 계정 이름.")


@lru_cache
def get_settings() -> Settings:
    """캐시된 설정 싱글톤을 반환합니다."""
    return Settings()
