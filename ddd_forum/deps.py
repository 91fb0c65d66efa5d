from fastapi import Depends
from sqlalchemy.orm import Session

from .database import get_db
from .repository import UserRepository
from .services import UserService


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Build a UserService bound to the request's database session."""
    return UserService(UserRepository(db))
