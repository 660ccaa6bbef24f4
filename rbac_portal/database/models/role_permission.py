from sqlalchemy import Column, Integer, ForeignKey, Index
from ..database import Base
from .audit import AuditMixin


class RolePermission(AuditMixin, Base):
    """역할(Role)과 권한(Permission) 사이의 연결(binding) 레코드입니다."""
    __tablename__ = "role_permissions"
    id = Column(Integer, primary_key=True, index=True)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False, index=True)
    permission_id = Column(Integer, ForeignKey("permissions.id"), nullable=False)


Index(
    "ux_role_permissions_active", RolePermission.role_id, RolePermission.permission_id,
    unique=True,
    sqlite_where=RolePermission.is_deleted == False,  # noqa: E712
    postgresql_where=RolePermission.is_deleted == False,  # noqa: E712
)
