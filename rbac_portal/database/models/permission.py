from sqlalchemy import Column, Integer, String, Index
from ..database import Base
from .audit import AuditMixin


class Permission(AuditMixin, Base):
    """
    특정 대상(target)에 대해 수행할 수 있는 하나의 원자적 권한입니다.
    (permission_type, target_id) 쌍으로 식별됩니다. (예: ('ModifyConfig', 'appX'))
    """
    __tablename__ = "permissions"
    id = Column(Integer, primary_key=True, index=True)
    permission_type = Column(String, nullable=False)
    target_id = Column(String, nullable=False, index=True)


Index(
    "ux_permissions_type_target_active", Permission.permission_type, Permission.target_id,
    unique=True,
    sqlite_where=Permission.is_deleted == False,  # noqa: E712
    postgresql_where=Permission.is_deleted == False,  # noqa: E712
)
