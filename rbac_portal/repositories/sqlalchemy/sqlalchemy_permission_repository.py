from typing import Iterable, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from rbac_portal.database import models
from rbac_portal.repositories.interfaces import IPermissionRepository
from rbac_portal.services.exceptions import PermissionAlreadyExistsError
from .filters import not_deleted

class SqlalchemyPermissionRepository(IPermissionRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def find_by_type_and_target(self, permission_type: str, target_id: str) -> Optional[models.Permission]:
        return self.db.query(models.Permission).filter(
            models.Permission.permission_type == permission_type,
            models.Permission.target_id == target_id,
            not_deleted(models.Permission)
        ).first()

    def find_by_types_and_target(self, permission_types: Iterable[str], target_id: str) -> List[models.Permission]:
        return self.db.query(models.Permission).filter(
            models.Permission.permission_type.in_(list(permission_types)),
            models.Permission.target_id == target_id,
            not_deleted(models.Permission)
        ).all()

    def create(self, permission_model: models.Permission) -> models.Permission:
        return self.create_all([permission_model])[0]

    def create_all(self, permission_models: List[models.Permission]) -> List[models.Permission]:
        self.db.add_all(permission_models)
        try:
            self.db.flush()
        except IntegrityError as e:
            pairs = sorted((p.permission_type, p.target_id) for p in permission_models)
            raise PermissionAlreadyExistsError(f"Permission already exists for one of {pairs}.") from e
        return permission_models
