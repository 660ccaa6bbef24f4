import logging

from rbac_portal.config import IConfigProvider
from rbac_portal.repositories.interfaces import (
    IPermissionRepository, IRolePermissionRepository, IUserRoleRepository
)

logger = logging.getLogger(__name__)


class AuthorizationService:
    """
    요청 시점에 "사용자 U가 대상 T에 대해 권한 P를 가지는가?"를 판정합니다.
    읽기만 수행하며 어떤 레코드도 변경하지 않습니다.
    """

    def __init__(
        self,
        permission_repo: IPermissionRepository,
        user_role_repo: IUserRoleRepository,
        role_permission_repo: IRolePermissionRepository,
        config: IConfigProvider,
    ):
        self.permission_repo = permission_repo
        self.user_role_repo = user_role_repo
        self.role_permission_repo = role_permission_repo
        self.config = config

    def user_has_permission(self, user_id: str, permission_type: str, target_id: str) -> bool:
        """
        사용자가 특정 대상에 대한 권한을 가지는지 확인합니다.

        판정 순서:
        1. 권한이 정의되어 있지 않으면 슈퍼 관리자라도 False
        2. 슈퍼 관리자는 역할과 무관하게 True
        3. 사용자의 활성 역할이 없으면 False
        4. 역할들에 연결된 권한 중 해당 권한이 있으면 True
        """
        permission = self.permission_repo.find_by_type_and_target(permission_type, target_id)
        if not permission:
            logger.debug(f"Permission ({permission_type}, {target_id}) is not defined")
            return False

        if self.is_super_admin(user_id):
            return True

        user_roles = self.user_role_repo.find_active_by_user_id(user_id)
        if not user_roles:
            return False

        role_ids = {user_role.role_id for user_role in user_roles}
        role_permissions = self.role_permission_repo.find_by_role_ids(role_ids)
        if not role_permissions:
            return False

        granted = permission.id in {rp.permission_id for rp in role_permissions}
        logger.debug(f"User '{user_id}' {'has' if granted else 'lacks'} ({permission_type}, {target_id})")
        return granted

    def is_super_admin(self, user_id: str) -> bool:
        return user_id in self.config.super_admins()
