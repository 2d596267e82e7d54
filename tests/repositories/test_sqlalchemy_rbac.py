# tests/repositories/test_sqlalchemy_rbac.py
import logging
import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.bootstrap import build_rbac_services
from src.database.database import Base, build_engine
from src.database import models
from src.database.models import RoleModule
from src.repositories.sqlalchemy.sqlalchemy_binding_repository import SqlalchemyRolePermissionRepository
from src.repositories.sqlalchemy.sqlalchemy_unit_of_work import SqlalchemyUnitOfWork
from src.repositories.sqlalchemy.sqlalchemy_role_repository import SqlalchemyRoleRepository
from src.schemas import PageRequest, UserQuery, RoleQuery, PermissionQuery
from src.services.exceptions import BindOwnerNotFoundError, BindTargetNotFoundError

# ===================================================================
#  인메모리 SQLite Fixture 설정
# ===================================================================

@pytest.fixture
def db_session():
    """테스트마다 새로운 인메모리 DB와 세션을 만듭니다."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()
    engine.dispose()

@pytest.fixture
def seeded(db_session):
    """
    users: alice(1), bob(2)
    roles: ADMIN(1) -> {10, 11}, AUDITOR(2) -> {12}, EMPTY(3) -> {}
    alice -> {ADMIN, AUDITOR}, bob -> {}
    """
    db_session.add_all([
        models.User(id=1, username="alice", display_name="Alice"),
        models.User(id=2, username="bob"),
        models.Role(id=1, code="ADMIN", name="Administrator"),
        models.Role(id=2, code="AUDITOR", name="Auditor"),
        models.Role(id=3, code="EMPTY", name="Empty role"),
        models.Permission(id=10, code="user:read", name="Read users"),
        models.Permission(id=11, code="user:write", name="Write users"),
        models.Permission(id=12, code="audit:read", name="Read audit log"),
    ])
    db_session.flush()
    db_session.add_all([
        models.RolePermission(role_id=1, permission_id=10),
        models.RolePermission(role_id=1, permission_id=11),
        models.RolePermission(role_id=2, permission_id=12),
        models.UserRole(user_id=1, role_id=1),
        models.UserRole(user_id=1, role_id=2),
    ])
    db_session.commit()
    return db_session

@pytest.fixture
def services(seeded):
    return build_rbac_services(seeded)

def bound_permission_ids(db_session, role_id):
    return [b.permission_id for b in SqlalchemyRolePermissionRepository(db_session).find_by_role_id(role_id)]

def bound_role_ids(db_session, user_id):
    return sorted(r.role_id for r in db_session.query(models.UserRole).filter(models.UserRole.user_id == user_id))

# ===================================================================
#  중첩 조회 테스트
# ===================================================================
class TestNestedQueries:
    def test_role_with_permissions(self, services):
        role = services.query.query_role_with_permissions(1)

        assert (role.id, role.code, role.name) == (1, "ADMIN", "Administrator")
        assert [p.id for p in role.permissions] == [10, 11]

    def test_role_without_permissions(self, services):
        """LEFT JOIN의 null 행이 가짜 권한 항목이 되지 않습니다."""
        role = services.query.query_role_with_permissions(3)

        assert role.code == "EMPTY"
        assert role.permissions == []

    def test_missing_role_and_user(self, services):
        assert services.query.query_role_with_permissions(99) is None
        assert services.query.query_user_with_roles_and_permissions(99) is None

    def test_user_with_roles_and_permissions(self, services):
        user = services.query.query_user_with_roles_and_permissions(1)

        assert user.username == "alice"
        assert [r.code for r in user.roles] == ["ADMIN", "AUDITOR"]
        assert [p.code for p in user.roles[0].permissions] == ["user:read", "user:write"]
        assert [p.code for p in user.roles[1].permissions] == ["audit:read"]

    def test_user_without_roles(self, services):
        user = services.query.query_user_with_roles_and_permissions(2)

        assert user.username == "bob"
        assert user.roles == []

# ===================================================================
#  페이지 조회 테스트
# ===================================================================
class TestPageQueries:
    def test_page_users(self, services):
        page = services.query.page_query_users(PageRequest(page=2, size=1), UserQuery())

        assert page.total == 2
        assert [u.username for u in page.items] == ["bob"]

    def test_page_users_filter_by_username(self, services):
        page = services.query.page_query_users(PageRequest(), UserQuery(username="lic"))

        assert page.total == 1
        assert page.items[0].username == "alice"
        assert len(page.items[0].roles) == 2

    def test_page_past_the_end_is_empty(self, services):
        page = services.query.page_query_users(PageRequest(page=5, size=10), UserQuery())

        assert page.total == 0
        assert page.items == []

    def test_page_roles_by_user(self, services):
        page = services.query.page_query_roles(PageRequest(), RoleQuery(user_id=1))

        assert page.total == 2
        assert [r.code for r in page.items] == ["ADMIN", "AUDITOR"]

    def test_page_roles_by_user_without_roles(self, services):
        page = services.query.page_query_roles(PageRequest(), RoleQuery(user_id=2))

        assert page.total == 0
        assert page.items == []

    def test_page_roles_filter_by_code_and_name(self, services):
        assert [r.id for r in services.query.page_query_roles(PageRequest(), RoleQuery(code="AUDITOR")).items] == [2]
        assert [r.id for r in services.query.page_query_roles(PageRequest(), RoleQuery(name="Admin")).items] == [1]

    def test_page_permissions_by_role(self, services):
        page = services.query.page_query_permissions(PageRequest(), PermissionQuery(role_id=1))

        assert page.total == 2
        assert [p.code for p in page.items] == ["user:read", "user:write"]

    def test_page_permissions_by_role_without_permissions(self, services):
        page = services.query.page_query_permissions(PageRequest(), PermissionQuery(role_id=3))

        assert page.total == 0
        assert page.items == []

# ===================================================================
#  바인딩 교체 테스트
# ===================================================================
class TestBindings:
    def test_partial_bind_keeps_only_existing_permissions(self, services, seeded):
        """역할 3에 [10, 11111]을 바인딩하면 존재하는 10만 남습니다."""
        services.binding.bind_permissions_to_role(3, [10, 11111])

        assert bound_permission_ids(seeded, 3) == [10]

    def test_duplicate_ids_bind_once(self, services, seeded):
        services.binding.bind_permissions_to_role(3, [12, 12, 10, 999])

        assert bound_permission_ids(seeded, 3) == [10, 12]

    def test_all_invalid_ids_roll_back_delete(self, services, seeded):
        """대상이 하나도 없으면 오류가 발생하고, 역할의 기존 바인딩은 그대로 유지됩니다."""
        with pytest.raises(BindTargetNotFoundError):
            services.binding.bind_permissions_to_role(1, [999])

        assert bound_permission_ids(seeded, 1) == [10, 11]
        assert [p.id for p in services.query.query_role_with_permissions(1).permissions] == [10, 11]

    def test_empty_bind_clears_permissions(self, services, seeded):
        services.binding.bind_permissions_to_role(1, [])

        assert bound_permission_ids(seeded, 1) == []
        assert services.query.query_role_with_permissions(1).permissions == []

    def test_bind_roles_to_user_is_idempotent(self, services, seeded):
        services.binding.bind_roles_to_user(2, [2, 3])
        services.binding.bind_roles_to_user(2, [2, 3])

        assert bound_role_ids(seeded, 2) == [2, 3]

    def test_bind_roles_to_user_replaces_previous_set(self, services, seeded):
        services.binding.bind_roles_to_user(1, [3])

        assert bound_role_ids(seeded, 1) == [3]
        assert [r.code for r in services.query.query_user_with_roles_and_permissions(1).roles] == ["EMPTY"]

    def test_bind_roles_to_user_all_invalid_rolls_back(self, services, seeded):
        with pytest.raises(BindTargetNotFoundError):
            services.binding.bind_roles_to_user(1, [404])

        assert bound_role_ids(seeded, 1) == [1, 2]

    def test_bind_permissions_to_missing_role_writes_nothing(self, services, seeded):
        """존재하지 않는 역할에는 권한을 바인딩할 수 없고, 고아 매핑 행이 남지 않습니다."""
        with pytest.raises(BindOwnerNotFoundError, match="bind role not exist"):
            services.binding.bind_permissions_to_role(999, [10])

        assert bound_permission_ids(seeded, 999) == []

    def test_bind_roles_to_missing_user_writes_nothing(self, services, seeded):
        """존재하지 않는 사용자에게는 역할을 바인딩할 수 없고, 고아 매핑 행이 남지 않습니다."""
        with pytest.raises(BindOwnerNotFoundError, match="bind user not exist"):
            services.binding.bind_roles_to_user(999, [1])

        assert bound_role_ids(seeded, 999) == []

    def test_bind_role_module_to_user(self, services, seeded):
        """MEMBER 역할은 DB에 없으므로 ADMIN만 바인딩됩니다."""
        services.binding.bind_role_module_to_user(2, [RoleModule.ADMIN, RoleModule.MEMBER])

        assert bound_role_ids(seeded, 2) == [1]

# ===================================================================
#  작업 단위(트랜잭션) 테스트
# ===================================================================
class TestUnitOfWork:
    def test_nested_failure_rolls_back_everything(self, seeded):
        uow = SqlalchemyUnitOfWork(seeded)

        with pytest.raises(RuntimeError):
            with uow.transaction():
                seeded.add(models.Role(id=20, code="TEMP", name="Temporary"))
                with uow.transaction():
                    seeded.flush()
                    raise RuntimeError("boom")

        assert SqlalchemyRoleRepository(seeded).find_by_id(20) is None

    def test_commit_persists(self, seeded):
        uow = SqlalchemyUnitOfWork(seeded)

        with uow.transaction():
            seeded.add(models.Role(id=21, code="KEEP", name="Kept"))

        seeded.rollback()
        assert SqlalchemyRoleRepository(seeded).find_by_id(21).code == "KEEP"

    def test_base_exception_also_rolls_back(self, seeded):
        """KeyboardInterrupt 같은 BaseException에도 롤백되어, 다음 트랜잭션이 남은 변경을 커밋하지 않습니다."""
        uow = SqlalchemyUnitOfWork(seeded)

        with pytest.raises(KeyboardInterrupt):
            with uow.transaction():
                SqlalchemyRolePermissionRepository(seeded).delete_by_role_id(1)
                raise KeyboardInterrupt()

        with uow.transaction():
            pass

        assert bound_permission_ids(seeded, 1) == [10, 11]

    def test_sqlite_enforces_foreign_keys(self, seeded):
        """저장소 계층도 존재하지 않는 소유자를 가리키는 매핑 행을 거부합니다."""
        with pytest.raises(IntegrityError):
            SqlalchemyRolePermissionRepository(seeded).bulk_insert(
                [models.RolePermission(role_id=999, permission_id=10)]
            )
        seeded.rollback()

    def test_business_error_is_logged_once_without_traceback(self, services, caplog):
        """비즈니스 오류로 인한 롤백은 서비스의 경고 한 줄로만 기록됩니다."""
        with caplog.at_level(logging.WARNING):
            with pytest.raises(BindTargetNotFoundError):
                services.binding.bind_permissions_to_role(1, [999])

        warnings = [r for r in caplog.records if r.levelno >= logging.WARNING]
        assert len(warnings) == 1
        assert warnings[0].exc_info is None
