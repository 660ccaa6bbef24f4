from typing import Iterable, List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from rbac_portal.database import models
from rbac_portal.repositories.interfaces import IUserRoleRepository
from rbac_portal.services.exceptions import RoleAlreadyAssignedError
from .filters import not_deleted

class SqlalchemyUserRoleRepository(IUserRoleRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def find_active_by_user_ids_and_role_id(self, user_ids: Iterable[str], role_id: int) -> List[models.UserRole]:
        user_ids = list(user_ids)
        if not user_ids:
            return []
        return self.db.query(models.UserRole).filter(
            models.UserRole.user_id.in_(user_ids),
            models.UserRole.role_id == role_id,
            not_deleted(models.UserRole)
        ).all()

    def find_active_by_role_id(self, role_id: int) -> List[models.UserRole]:
        return self.db.query(models.UserRole).filter(
            models.UserRole.role_id == role_id,
            not_deleted(models.UserRole)
        ).order_by(models.UserRole.user_id.asc()).all()

    def find_active_by_user_id(self, user_id: str) -> List[models.UserRole]:
        return self.db.query(models.UserRole).filter(
            models.UserRole.user_id == user_id,
            not_deleted(models.UserRole)
        ).all()

    def create_all(self, user_roles: List[models.UserRole]) -> List[models.UserRole]:
        self.db.add_all(user_roles)
        try:
            self.db.flush()
        except IntegrityError as e:
            user_ids = sorted(ur.user_id for ur in user_roles)
            raise RoleAlreadyAssignedError(f"Role is already assigned to one of users {user_ids}.") from e
        return user_roles

    def save_all(self, user_roles: List[models.UserRole]) -> List[models.UserRole]:
        for user_role in user_roles:
            self.db.merge(user_role)
        self.db.flush()
        return user_roles
