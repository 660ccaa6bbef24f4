from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from rbac_portal.database import models
from rbac_portal.repositories.interfaces import IRoleRepository
from rbac_portal.services.exceptions import RoleAlreadyExistsError
from .filters import not_deleted

class SqlalchemyRoleRepository(IRoleRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def find_by_name(self, name: str) -> Optional[models.Role]:
        return self.db.query(models.Role).filter(
            models.Role.name == name, not_deleted(models.Role)
        ).first()

    def create(self, role_model: models.Role) -> models.Role:
        self.db.add(role_model)
        try:
            self.db.flush()
        except IntegrityError as e:
            raise RoleAlreadyExistsError(f"Role '{role_model.name}' already exists.") from e
        return role_model
