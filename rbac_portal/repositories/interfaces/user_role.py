from abc import ABC, abstractmethod
from typing import Iterable, List
from rbac_portal.database import models

class IUserRoleRepository(ABC):
    @abstractmethod
    def find_active_by_user_ids_and_role_id(self, user_ids: Iterable[str], role_id: int) -> List[models.UserRole]:
        """주어진 사용자들 중 해당 역할을 활성 상태로 보유한 연결 레코드를 조회합니다."""
        pass

    @abstractmethod
    def find_active_by_role_id(self, role_id: int) -> List[models.UserRole]:
        """특정 역할의 모든 활성 연결 레코드를 조회합니다."""
        pass

    @abstractmethod
    def find_active_by_user_id(self, user_id: str) -> List[models.UserRole]:
        """특정 사용자의 모든 활성 연결 레코드를 조회합니다."""
        pass

    @abstractmethod
    def create_all(self, user_roles: List[models.UserRole]) -> List[models.UserRole]:
        """
        새로운 사용자-역할 연결 레코드들을 현재 작업 단위에 추가합니다.

        Raises:
            RoleAlreadyAssignedError: 동시에 같은 (user_id, role_id) 활성 레코드가 생성되어
                저장소의 유일성 제약을 위반했을 때.
        """
        pass

    @abstractmethod
    def save_all(self, user_roles: List[models.UserRole]) -> List[models.UserRole]:
        """기존 연결 레코드의 변경 사항(소프트 삭제 등)을 제자리에서 반영합니다."""
        pass
