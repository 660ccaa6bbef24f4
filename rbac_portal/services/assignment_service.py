import logging
from datetime import datetime
from typing import Set

from rbac_portal.database import models
from rbac_portal.repositories.interfaces import IRoleRepository, IUserRoleRepository, IUnitOfWork
from rbac_portal.services.exceptions import RoleNotFoundError
from rbac_portal.services.user_info import UserInfo
from rbac_portal.utils.set_ops import user_ids_to_assign

logger = logging.getLogger(__name__)


class AssignmentService:
    """사용자에게 역할을 부여하고 회수합니다. 회수는 소프트 삭제로만 이루어집니다."""

    def __init__(self, role_repo: IRoleRepository, user_role_repo: IUserRoleRepository, uow: IUnitOfWork):
        self.role_repo = role_repo
        self.user_role_repo = user_role_repo
        self.uow = uow

    def _get_role(self, role_name: str) -> models.Role:
        role = self.role_repo.find_by_name(role_name)
        if not role:
            raise RoleNotFoundError(f"Role '{role_name}' doesn't exist.")
        return role

    @staticmethod
    def _as_user_id_set(user_ids) -> Set[str]:
        # 문자열 하나를 넘기면 글자 단위 사용자로 쪼개지므로 거부합니다.
        if isinstance(user_ids, str):
            raise ValueError(f"user_ids must be a collection of user ids, got string '{user_ids}'.")
        return set(user_ids)

    def assign_role_to_users(self, role_name: str, user_ids: Set[str], operator_id: str) -> Set[str]:
        """
        여러 사용자에게 역할을 부여합니다. 이미 역할을 가진 사용자는 건너뜁니다.

        Args:
            role_name: 부여할 역할의 이름.
            user_ids: 역할을 부여할 사용자 ID 집합.
            operator_id: 작업을 수행하는 운영자 ID (생성자/수정자로 기록).

        Returns:
            이번 호출로 새로 역할을 부여받은 사용자 ID 집합.

        Raises:
            RoleNotFoundError: 해당 이름의 역할을 찾을 수 없을 때.
            RoleAlreadyAssignedError: 동시 요청이 같은 사용자에게 먼저 역할을 부여했을 때.
        """
        user_ids = self._as_user_id_set(user_ids)
        with self.uow:
            role = self._get_role(role_name)
            existing = self.user_role_repo.find_active_by_user_ids_and_role_id(user_ids, role.id)
            to_assign = user_ids_to_assign(user_ids, existing)

            if to_assign:
                self.user_role_repo.create_all([
                    models.UserRole(
                        user_id=user_id,
                        role_id=role.id,
                        created_by=operator_id,
                        last_modified_by=operator_id,
                    )
                    for user_id in sorted(to_assign)
                ])

        logger.info(f"Role '{role_name}' assigned to {sorted(to_assign)} by '{operator_id}'")
        return to_assign

    def remove_role_from_users(self, role_name: str, user_ids: Set[str], operator_id: str) -> None:
        """
        여러 사용자에게서 역할을 회수합니다. 역할이 없는 사용자는 조용히 무시합니다.

        Raises:
            RoleNotFoundError: 해당 이름의 역할을 찾을 수 없을 때.
        """
        user_ids = self._as_user_id_set(user_ids)
        with self.uow:
            role = self._get_role(role_name)
            existing = self.user_role_repo.find_active_by_user_ids_and_role_id(user_ids, role.id)

            now = datetime.now()
            for user_role in existing:
                user_role.is_deleted = True
                user_role.last_modified_at = now
                user_role.last_modified_by = operator_id

            if existing:
                self.user_role_repo.save_all(existing)
            revoked = sorted(ur.user_id for ur in existing)

        logger.info(f"Role '{role_name}' removed from {revoked} by '{operator_id}'")

    def query_users_with_role(self, role_name: str) -> Set[UserInfo]:
        """역할을 보유한 사용자 목록을 조회합니다. 역할이 없으면 빈 집합을 반환합니다."""
        role = self.role_repo.find_by_name(role_name)
        if not role:
            return set()
        return {UserInfo(user_id=ur.user_id) for ur in self.user_role_repo.find_active_by_role_id(role.id)}
