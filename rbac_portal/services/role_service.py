import logging
from typing import Iterable, List, Optional

from rbac_portal.database import models
from rbac_portal.repositories.interfaces import (
    IRoleRepository, IPermissionRepository, IRolePermissionRepository, IUnitOfWork
)
from rbac_portal.services.exceptions import RoleAlreadyExistsError, PermissionAlreadyExistsError
from rbac_portal.utils.set_ops import group_types_by_target, find_duplicate_pairs

logger = logging.getLogger(__name__)


class RoleService:
    """역할과 권한을 정의하고, 역할 생성 시 초기 권한 연결을 함께 만드는 서비스입니다."""

    def __init__(
        self,
        role_repo: IRoleRepository,
        permission_repo: IPermissionRepository,
        role_permission_repo: IRolePermissionRepository,
        uow: IUnitOfWork,
    ):
        """
        RoleService를 초기화합니다.

        Args:
            role_repo: 역할 데이터에 접근하기 위한 리포지토리.
            permission_repo: 권한 데이터에 접근하기 위한 리포지토리.
            role_permission_repo: 역할-권한 연결 데이터에 접근하기 위한 리포지토리.
            uow: 여러 쓰기를 하나의 트랜잭션으로 묶는 작업 단위.
        """
        self.role_repo = role_repo
        self.permission_repo = permission_repo
        self.role_permission_repo = role_permission_repo
        self.uow = uow

    def find_role_by_name(self, role_name: str) -> Optional[models.Role]:
        """이름으로 역할을 조회합니다. 역할 이름은 유일하므로 최대 하나만 반환됩니다."""
        return self.role_repo.find_by_name(role_name)

    def create_role_with_permissions(self, role: models.Role, permission_ids: Optional[Iterable[int]] = None) -> models.Role:
        """
        역할을 생성하고, 주어진 권한들과의 연결을 같은 트랜잭션 안에서 생성합니다.
        연결 생성 중 하나라도 실패하면 역할 생성까지 모두 롤백됩니다.

        Args:
            role: 생성할 역할 모델. created_by/last_modified_by가 연결 레코드에도 그대로 쓰입니다.
            permission_ids: 역할에 연결할 권한 ID 집합. 비어 있으면 연결을 만들지 않습니다.

        Returns:
            생성된 ID가 채워진 역할 모델.

        Raises:
            RoleAlreadyExistsError: 동일한 이름의 역할이 이미 존재할 때.
        """
        permission_ids = sorted(set(permission_ids or []))
        with self.uow:
            if self.role_repo.find_by_name(role.name):
                raise RoleAlreadyExistsError(f"Role '{role.name}' already exists.")

            created_role = self.role_repo.create(role)

            if permission_ids:
                bindings = [
                    models.RolePermission(
                        role_id=created_role.id,
                        permission_id=permission_id,
                        created_by=created_role.created_by,
                        last_modified_by=created_role.last_modified_by,
                    )
                    for permission_id in permission_ids
                ]
                self.role_permission_repo.create_all(bindings)

        logger.info(f"Role '{created_role.name}' created with permissions {permission_ids}")
        return created_role

    def create_permission(self, permission: models.Permission) -> models.Permission:
        """
        단일 권한을 생성합니다.

        Raises:
            PermissionAlreadyExistsError: 같은 (permission_type, target_id) 권한이 이미 존재할 때.
        """
        permission_type, target_id = permission.permission_type, permission.target_id
        with self.uow:
            if self.permission_repo.find_by_type_and_target(permission_type, target_id):
                raise PermissionAlreadyExistsError(
                    f"Permission with permission_type '{permission_type}' target_id '{target_id}' already exists."
                )
            created_permission = self.permission_repo.create(permission)

        logger.info(f"Permission ({permission_type}, {target_id}) created")
        return created_permission

    def create_permissions(self, permissions: Iterable[models.Permission]) -> List[models.Permission]:
        """
        여러 권한을 한 번에 생성합니다.

        요청 내부 중복을 먼저 거부한 뒤, target_id별로 요청된 유형 집합을 묶어
        대상마다 한 번씩 기존 권한 존재 여부를 확인합니다. 하나의 대상에서라도 충돌이
        발견되면 아무것도 저장하지 않습니다.

        Returns:
            생성된 권한 모델 목록.

        Raises:
            PermissionAlreadyExistsError: 요청 내부에 중복 쌍이 있거나, 이미 존재하는 권한과 충돌할 때.
        """
        permissions = list(permissions)
        if not permissions:
            return []

        duplicates = find_duplicate_pairs(permissions)
        if duplicates:
            raise PermissionAlreadyExistsError(
                f"Duplicate permissions in request: {sorted(duplicates)}."
            )

        with self.uow:
            for target_id, permission_types in group_types_by_target(permissions).items():
                if self.permission_repo.find_by_types_and_target(permission_types, target_id):
                    raise PermissionAlreadyExistsError(
                        f"Permission with permission_type {sorted(permission_types)} target_id '{target_id}' already exists."
                    )
            created_permissions = self.permission_repo.create_all(permissions)

        logger.info(f"{len(created_permissions)} permissions created")
        return created_permissions
