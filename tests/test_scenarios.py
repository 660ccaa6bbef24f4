# tests/test_scenarios.py
import pytest
from unittest.mock import MagicMock
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from rbac_portal.config import EnvConfigProvider
from rbac_portal.database import models
from rbac_portal.database.database import SessionLocal
from rbac_portal.database.db_init import initialize_db
from rbac_portal import factory
from rbac_portal.factory import create_services
from rbac_portal.repositories.interfaces import IRolePermissionRepository
from rbac_portal.repositories.sqlalchemy.sqlalchemy_role_repository import SqlalchemyRoleRepository
from rbac_portal.repositories.sqlalchemy.sqlalchemy_permission_repository import SqlalchemyPermissionRepository
from rbac_portal.repositories.sqlalchemy.sqlalchemy_unit_of_work import SqlalchemyUnitOfWork
from rbac_portal.services.role_service import RoleService
from rbac_portal.services.user_info import UserInfo
from rbac_portal.services.exceptions import AlreadyExistsError, RoleNotFoundError

# ===================================================================
#  Fixture 설정 (실제 SQLAlchemy 리포지토리 + 인메모리 SQLite)
# ===================================================================

@pytest.fixture
def db_session():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    initialize_db(bind=engine)
    session = SessionLocal(bind=engine)
    yield session
    session.close()
    engine.dispose()

@pytest.fixture
def services(db_session, monkeypatch):
    """'root'를 슈퍼 관리자로 설정하고 서비스들을 생성합니다."""
    monkeypatch.setenv("RBAC_SUPER_ADMINS", "root")
    return create_services(db_session, EnvConfigProvider())

@pytest.fixture
def admin_role(services):
    """(ModifyConfig, appX), (ReleaseConfig, appX) 권한이 연결된 'Admin' 역할을 생성합니다."""
    role_service = services['role']
    modify, release = role_service.create_permissions([
        models.Permission(permission_type="ModifyConfig", target_id="appX", created_by="apollo"),
        models.Permission(permission_type="ReleaseConfig", target_id="appX", created_by="apollo"),
    ])
    return role_service.create_role_with_permissions(
        models.Role(name="Admin", created_by="apollo", last_modified_by="apollo"), {modify.id, release.id}
    )

# ===================================================================
#  전체 흐름 시나리오 테스트
# ===================================================================
class TestGrantAndRevokeScenario:
    def test_assign_then_remove_changes_decision(self, services, admin_role):
        """역할 부여 후에는 허용되고, 회수 후에는 거부되는지 테스트합니다."""
        assignment, authorization = services['assignment'], services['authorization']

        assert authorization.user_has_permission("alice", "ModifyConfig", "appX") is False

        assert assignment.assign_role_to_users("Admin", {"alice"}, "operator") == {"alice"}
        assert authorization.user_has_permission("alice", "ModifyConfig", "appX") is True
        assert assignment.query_users_with_role("Admin") == {UserInfo("alice")}

        assignment.remove_role_from_users("Admin", {"alice"}, "operator")
        assert authorization.user_has_permission("alice", "ModifyConfig", "appX") is False
        assert assignment.query_users_with_role("Admin") == set()

    def test_assignment_is_idempotent(self, services, db_session, admin_role):
        assignment = services['assignment']

        assert assignment.assign_role_to_users("Admin", {"alice"}, "operator") == {"alice"}
        assert assignment.assign_role_to_users("Admin", {"alice", "bob"}, "operator") == {"bob"}

        rows = db_session.query(models.UserRole).filter(models.UserRole.user_id == "alice").all()
        assert len(rows) == 1

    def test_removal_keeps_history(self, services, db_session, admin_role):
        """회수된 레코드는 삭제되지 않고 수정자 정보와 함께 남습니다."""
        assignment = services['assignment']
        assignment.assign_role_to_users("Admin", {"alice"}, "operator")
        assignment.remove_role_from_users("Admin", {"alice", "nobody"}, "auditor")

        row = db_session.query(models.UserRole).one()
        assert row.is_deleted is True
        assert row.created_by == "operator"
        assert row.last_modified_by == "auditor"

    def test_remove_from_unknown_role_fails(self, services):
        with pytest.raises(RoleNotFoundError):
            services['assignment'].remove_role_from_users("Ghost", {"alice"}, "operator")

    def test_super_admin_and_undefined_permission(self, services, admin_role):
        authorization = services['authorization']

        assert authorization.user_has_permission("root", "ModifyConfig", "appX") is True
        assert authorization.user_has_permission("root", "ModifyConfig", "undefined-app") is False

    def test_other_permissions_only_are_denied(self, services, admin_role):
        """다른 대상의 권한만 가진 역할로는 허용되지 않습니다."""
        role_service, assignment = services['role'], services['assignment']
        other = role_service.create_permission(models.Permission(permission_type="ModifyConfig", target_id="appY"))
        role_service.create_role_with_permissions(models.Role(name="AppYEditor"), {other.id})
        assignment.assign_role_to_users("AppYEditor", {"carol"}, "operator")

        assert services['authorization'].user_has_permission("carol", "ModifyConfig", "appY") is True
        assert services['authorization'].user_has_permission("carol", "ModifyConfig", "appX") is False

# ===================================================================
#  유일성 및 원자성 시나리오 테스트
# ===================================================================
class TestUniquenessAndAtomicity:
    def test_role_created_twice(self, services, db_session, admin_role):
        with pytest.raises(AlreadyExistsError):
            services['role'].create_role_with_permissions(models.Role(name="Admin"), set())

        assert db_session.query(models.Role).filter(models.Role.name == "Admin").count() == 1

    def test_permission_created_twice_in_batch(self, services, db_session, admin_role):
        with pytest.raises(AlreadyExistsError):
            services['role'].create_permissions([
                models.Permission(permission_type="DeleteConfig", target_id="appX"),
                models.Permission(permission_type="ModifyConfig", target_id="appX"),
            ])

        assert db_session.query(models.Permission).count() == 2

    def test_intra_batch_duplicate_writes_nothing(self, services, db_session):
        with pytest.raises(AlreadyExistsError):
            services['role'].create_permissions([
                models.Permission(permission_type="Create", target_id="app1"),
                models.Permission(permission_type="Create", target_id="app1"),
            ])

        assert db_session.query(models.Permission).count() == 0

    def test_role_rolled_back_when_binding_write_fails(self, db_session):
        """연결 레코드 저장이 실패하면 역할도 저장되지 않고, 저장소 예외가 그대로 전파됩니다."""
        # === Arrange ===
        failing_binding_repo = MagicMock(spec=IRolePermissionRepository)
        failing_binding_repo.create_all.side_effect = SQLAlchemyError("disk I/O error")
        role_service = RoleService(
            SqlalchemyRoleRepository(db_session),
            SqlalchemyPermissionRepository(db_session),
            failing_binding_repo,
            SqlalchemyUnitOfWork(db_session),
        )

        # === Act & Assert ===
        with pytest.raises(SQLAlchemyError, match="disk I/O error"):
            role_service.create_role_with_permissions(models.Role(name="Admin"), {1})
        assert db_session.query(models.Role).count() == 0

# ===================================================================
#  service_scope 테스트
# ===================================================================
def test_service_scope_opens_and_closes_session(monkeypatch):
    """service_scope가 세션을 열어 서비스를 제공하고, 끝나면 세션을 닫는지 테스트합니다."""
    mock_session = MagicMock()
    monkeypatch.setattr("rbac_portal.factory.SessionLocal", MagicMock(return_value=mock_session))

    with factory.service_scope() as scoped:
        assert set(scoped) == {'role', 'assignment', 'authorization'}
        mock_session.close.assert_not_called()

    mock_session.close.assert_called_once()

# ===================================================================
#  세션 종료 후 반환 모델 접근 테스트
# ===================================================================
def test_created_models_readable_after_session_close():
    """서비스가 반환한 모델은 세션을 닫은 뒤에도 속성을 읽을 수 있어야 합니다."""
    # === Arrange ===
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    initialize_db(bind=engine)
    session = SessionLocal(bind=engine)
    role_service = create_services(session, EnvConfigProvider())['role']

    # === Act ===
    single = role_service.create_permission(models.Permission(permission_type="ModifyConfig", target_id="appX"))
    batch = role_service.create_permissions([
        models.Permission(permission_type="ReleaseConfig", target_id="appX"),
        models.Permission(permission_type="ModifyConfig", target_id="appY"),
    ])
    role = role_service.create_role_with_permissions(models.Role(name="Admin"), {single.id})
    session.close()

    # === Assert ===
    assert single.id is not None
    assert single.permission_type == "ModifyConfig"
    assert all(p.id is not None for p in batch)
    assert [p.target_id for p in batch] == ["appX", "appY"]
    assert role.id is not None
    assert role.name == "Admin"
    engine.dispose()
