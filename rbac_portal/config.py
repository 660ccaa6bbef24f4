# rbac_portal/config.py
import os
import logging
from abc import ABC, abstractmethod
from typing import FrozenSet

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///rbac_portal.db"


def get_database_url() -> str:
    """RBAC_DATABASE_URL 환경 변수에서 데이터베이스 연결 문자열을 읽습니다."""
    return os.getenv("RBAC_DATABASE_URL", DEFAULT_DATABASE_URL)


class IConfigProvider(ABC):
    @abstractmethod
    def super_admins(self) -> FrozenSet[str]:
        """현재 설정된 슈퍼 관리자 사용자 ID 집합을 반환합니다."""
        pass


class EnvConfigProvider(IConfigProvider):
    """
    환경 변수 RBAC_SUPER_ADMINS(쉼표 구분)에서 슈퍼 관리자 목록을 읽습니다.
    호출할 때마다 환경 변수를 다시 읽으므로 캐시하지 않습니다.
    """
    ENV_KEY = "RBAC_SUPER_ADMINS"

    def super_admins(self) -> FrozenSet[str]:
        raw = os.getenv(self.ENV_KEY, "")
        admins = frozenset(part.strip() for part in raw.split(",") if part.strip())
        if raw and not admins:
            logger.warning(f"Invalid {self.ENV_KEY} format: {raw!r}, no super admins configured")
        return admins
