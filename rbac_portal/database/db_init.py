import logging

from .database import engine, Base
from . import models  # noqa: F401  (테이블 메타데이터 등록)

logger = logging.getLogger(__name__)


def initialize_db(bind=None):
    """
    RBAC 테이블과 부분 유니크 인덱스를 생성합니다. (이미 존재하면 생성하지 않음)

    Args:
        bind: 사용할 SQLAlchemy 엔진. 생략하면 기본 엔진을 사용합니다.
    """
    bind = bind if bind is not None else engine
    logger.info("Initializing RBAC schema on %s", bind.url)
    Base.metadata.create_all(bind=bind)
    logger.info("RBAC tables ready: %s", ", ".join(sorted(Base.metadata.tables)))


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    initialize_db()
