from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from rbac_portal.database import models

class IPermissionRepository(ABC):
    @abstractmethod
    def find_by_type_and_target(self, permission_type: str, target_id: str) -> Optional[models.Permission]:
        """(permission_type, target_id) 쌍으로 삭제되지 않은 권한을 조회합니다."""
        pass

    @abstractmethod
    def find_by_types_and_target(self, permission_types: Iterable[str], target_id: str) -> List[models.Permission]:
        """특정 대상에 대해 주어진 유형 중 하나에 해당하는 기존 권한 목록을 조회합니다."""
        pass

    @abstractmethod
    def create(self, permission_model: models.Permission) -> models.Permission:
        """
        새로운 권한을 현재 작업 단위에 추가합니다.

        Raises:
            PermissionAlreadyExistsError: (permission_type, target_id) 유일성 제약을 위반했을 때.
        """
        pass

    @abstractmethod
    def create_all(self, permission_models: List[models.Permission]) -> List[models.Permission]:
        """여러 권한을 한 번에 현재 작업 단위에 추가합니다."""
        pass
