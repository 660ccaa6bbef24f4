from sqlalchemy import Column, String, Boolean, DateTime, func


class AuditMixin:
    """
    모든 RBAC 레코드가 공유하는 감사(audit) 컬럼과 소프트 삭제 플래그입니다.
    레코드는 물리적으로 삭제되지 않고 is_deleted 플래그로 비활성화됩니다.
    """
    is_deleted = Column(Boolean, nullable=False, default=False)
    created_by = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    last_modified_by = Column(String, nullable=True)
    last_modified_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
