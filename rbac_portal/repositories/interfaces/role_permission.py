from abc import ABC, abstractmethod
from typing import Iterable, List
from rbac_portal.database import models

class IRolePermissionRepository(ABC):
    @abstractmethod
    def find_by_role_ids(self, role_ids: Iterable[int]) -> List[models.RolePermission]:
        """주어진 역할들에 연결된 삭제되지 않은 역할-권한 레코드를 조회합니다."""
        pass

    @abstractmethod
    def create_all(self, role_permissions: List[models.RolePermission]) -> List[models.RolePermission]:
        """역할-권한 연결 레코드들을 현재 작업 단위에 추가합니다."""
        pass
