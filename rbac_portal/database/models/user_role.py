from sqlalchemy import Column, Integer, String, ForeignKey, Index
from ..database import Base
from .audit import AuditMixin


class UserRole(AuditMixin, Base):
    """
    사용자(User)와 역할(Role) 사이의 연결 레코드입니다.
    사용자 ID는 외부 신원 시스템의 식별자를 그대로 저장합니다.
    역할 회수는 is_deleted=True로 표시하는 소프트 삭제로만 이루어지므로
    과거 부여 이력이 그대로 남습니다.
    (user_id, role_id) 쌍에 대해 활성 레코드는 최대 하나만 존재할 수 있습니다.
    """
    __tablename__ = "user_roles"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False, index=True)


Index(
    "ux_user_roles_active", UserRole.user_id, UserRole.role_id,
    unique=True,
    sqlite_where=UserRole.is_deleted == False,  # noqa: E712
    postgresql_where=UserRole.is_deleted == False,  # noqa: E712
)
