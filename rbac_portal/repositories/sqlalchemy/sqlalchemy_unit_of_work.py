import logging
from sqlalchemy.orm import Session
from rbac_portal.repositories.interfaces import IUnitOfWork

logger = logging.getLogger(__name__)

class SqlalchemyUnitOfWork(IUnitOfWork):
    def __init__(self, db_session: Session):
        self.db = db_session

    def commit(self):
        self.db.commit()

    def rollback(self):
        logger.warning("Rolling back RBAC unit of work")
        self.db.rollback()
