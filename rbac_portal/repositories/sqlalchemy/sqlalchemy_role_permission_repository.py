from typing import Iterable, List
from sqlalchemy.orm import Session
from rbac_portal.database import models
from rbac_portal.repositories.interfaces import IRolePermissionRepository
from .filters import not_deleted

class SqlalchemyRolePermissionRepository(IRolePermissionRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def find_by_role_ids(self, role_ids: Iterable[int]) -> List[models.RolePermission]:
        role_ids = list(role_ids)
        if not role_ids:
            return []
        return self.db.query(models.RolePermission).filter(
            models.RolePermission.role_id.in_(role_ids),
            not_deleted(models.RolePermission)
        ).all()

    def create_all(self, role_permissions: List[models.RolePermission]) -> List[models.RolePermission]:
        self.db.add_all(role_permissions)
        self.db.flush()
        return role_permissions
