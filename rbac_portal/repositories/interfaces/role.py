from abc import ABC, abstractmethod
from typing import Optional
from rbac_portal.database import models

class IRoleRepository(ABC):
    @abstractmethod
    def find_by_name(self, name: str) -> Optional[models.Role]:
        """이름으로 삭제되지 않은 역할을 조회합니다."""
        pass

    @abstractmethod
    def create(self, role_model: models.Role) -> models.Role:
        """
        새로운 역할을 현재 작업 단위에 추가하고, 생성된 ID가 채워진 모델을 반환합니다.

        Raises:
            RoleAlreadyExistsError: 저장소의 역할 이름 유일성 제약을 위반했을 때.
        """
        pass
