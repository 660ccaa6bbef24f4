# rbac_portal/factory.py
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from sqlalchemy.orm import Session

from rbac_portal.config import IConfigProvider, EnvConfigProvider
from rbac_portal.database.database import SessionLocal
from rbac_portal.repositories.sqlalchemy.sqlalchemy_role_repository import SqlalchemyRoleRepository
from rbac_portal.repositories.sqlalchemy.sqlalchemy_permission_repository import SqlalchemyPermissionRepository
from rbac_portal.repositories.sqlalchemy.sqlalchemy_role_permission_repository import SqlalchemyRolePermissionRepository
from rbac_portal.repositories.sqlalchemy.sqlalchemy_user_role_repository import SqlalchemyUserRoleRepository
from rbac_portal.repositories.sqlalchemy.sqlalchemy_unit_of_work import SqlalchemyUnitOfWork
from rbac_portal.services.role_service import RoleService
from rbac_portal.services.assignment_service import AssignmentService
from rbac_portal.services.authorization_service import AuthorizationService


def create_services(db_session: Session, config: Optional[IConfigProvider] = None) -> Dict[str, Any]:
    """
    하나의 DB 세션에 묶인 리포지토리와 서비스들을 생성합니다. (Repositories -> Services)
    요청마다 새 세션으로 호출하고, 요청이 끝나면 호출한 쪽에서 세션을 닫습니다.
    """
    role_repo = SqlalchemyRoleRepository(db_session)
    permission_repo = SqlalchemyPermissionRepository(db_session)
    role_permission_repo = SqlalchemyRolePermissionRepository(db_session)
    user_role_repo = SqlalchemyUserRoleRepository(db_session)
    uow = SqlalchemyUnitOfWork(db_session)

    return {
        'role': RoleService(role_repo, permission_repo, role_permission_repo, uow),
        'assignment': AssignmentService(role_repo, user_role_repo, uow),
        'authorization': AuthorizationService(
            permission_repo, user_role_repo, role_permission_repo, config or EnvConfigProvider()
        ),
    }


@contextmanager
def service_scope(config: Optional[IConfigProvider] = None) -> Iterator[Dict[str, Any]]:
    """
    새 세션을 열어 서비스들을 제공하고, 블록이 끝나면 세션을 닫습니다.

    사용법:
        with service_scope() as services:
            services['authorization'].user_has_permission("alice", "ModifyConfig", "appX")
    """
    db_session = SessionLocal()
    try:
        yield create_services(db_session, config)
    finally:
        db_session.close()
