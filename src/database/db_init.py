import logging

from src.bootstrap import build_rbac_services
from src.config import get_settings
from src.logging_config import configure_logging
from .database import engine, SessionLocal, Base
from .models import User, Role, RoleModule, ROLE_MODULE_NAMES, role_module_code

logger = logging.getLogger(__name__)

def initialize_db(bind=None, session_factory=None):
    """
    테이블을 생성하고, 역할 모듈별 역할과 관리자 계정을 삽입합니다.
    이미 존재하는 데이터는 건너뛰므로 여러 번 실행해도 안전합니다.

    Args:
        bind: 사용할 엔진. 없으면 설정값으로 만든 기본 엔진.
        session_factory: 세션 팩토리. 없으면 기본 SessionLocal.
    """
    bind = bind if bind is not None else engine
    session_factory = session_factory or SessionLocal
    settings = get_settings()

    # 모든 테이블을 생성합니다. (이미 존재하면 생성하지 않음)
    Base.metadata.create_all(bind=bind)
    logger.info("Tables created")

    db = session_factory()
    try:
        existing_codes = {code for (code,) in db.query(Role.code).all()}
        for module in RoleModule:
            code = role_module_code(module)
            if code not in existing_codes:
                db.add(Role(code=code, name=ROLE_MODULE_NAMES[module]))
                logger.info("Seeded role %s", code)

        admin = db.query(User).filter(User.username == settings.seed_admin_username).first()
        created_admin = admin is None
        if created_admin:
            admin = User(username=settings.seed_admin_username, display_name="Administrator")
            db.add(admin)
            logger.info("Seeded user %s", settings.seed_admin_username)

        # 변경사항을 커밋하여 각 객체의 id를 할당받습니다.
        db.commit()

        # 새로 만든 관리자에게만 SUPER_ADMIN을 부여합니다. 기존 관리자의 역할은 건드리지 않습니다.
        if created_admin:
            services = build_rbac_services(db)
            services.binding.bind_role_module_to_user(admin.id, [RoleModule.SUPER_ADMIN])
        logger.info("Database initialization complete")
    except Exception:
        logger.exception("Database initialization failed")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == '__main__':
    configure_logging()
    initialize_db()
