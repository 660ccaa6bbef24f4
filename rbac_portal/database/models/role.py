from sqlalchemy import Column, Integer, String, Index
from ..database import Base
from .audit import AuditMixin


class Role(AuditMixin, Base):
    """
    사용자에게 부여할 수 있는 권한(Permission)의 묶음을 정의합니다.
    (예: 'Admin', 'ConfigEditor').
    역할 이름은 삭제되지 않은 역할 사이에서 유일하며, 생성 후 변경되지 않습니다.
    """
    __tablename__ = "roles"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)


Index(
    "ux_roles_name_active", Role.name,
    unique=True,
    sqlite_where=Role.is_deleted == False,  # noqa: E712
    postgresql_where=Role.is_deleted == False,  # noqa: E712
)
