"""Repository for User database operations."""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import models

logger = logging.getLogger(__name__)


class UserRepository:
    """Datastore collaborator used by the user service."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int) -> Optional[models.User]:
        return self.db.get(models.User, user_id)

    def get_by_email(self, email: str) -> Optional[models.User]:
        return self.db.query(models.User).filter(models.User.email == email).first()

    def get_by_username(self, username: str) -> Optional[models.User]:
        return (
            self.db.query(models.User)
            .filter(models.User.username == username)
            .first()
        )

    def add(self, user: models.User) -> models.User:
        """Insert a new user and return it with its server-assigned id."""
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        return user

    def save(self, user: models.User) -> models.User:
        """Persist changes made to an already loaded user."""
        self._commit()
        self.db.refresh(user)
        return user

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("Commit failed: %s: %s", type(exc).__name__, exc)
            raise
