from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from rbac_portal.config import get_database_url

# 데이터베이스 연결 문자열 (RBAC_DATABASE_URL, 기본값은 SQLite)
SQLALCHEMY_DATABASE_URL = get_database_url()

# connect_args는 SQLite에서만 필요합니다. (thread-safe 설정)
connect_args = {"check_same_thread": False} if SQLALCHEMY_DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)

# 커밋은 작업 단위(Unit of Work)가 명시적으로 수행합니다.
# expire_on_commit=False: 커밋 후 세션이 닫혀도 반환된 모델의 속성이 유지됩니다.
SessionLocal = sessionmaker(autoflush=False, expire_on_commit=False, bind=engine)

# 모든 모델 클래스가 상속받을 Base 클래스
Base = declarative_base()
