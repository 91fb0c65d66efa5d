import logging
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError

from .. import errors, schemas
from ..deps import get_user_service
from ..responses import envelope
from ..services import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/new", status_code=status.HTTP_201_CREATED)
def create_user(
    details: schemas.UserDetails,
    service: UserService = Depends(get_user_service),
):
    try:
        user = service.create_user(details)
    except SQLAlchemyError as exc:
        logger.exception("Database error while creating user")
        raise errors.ServerError() from exc

    return envelope(status.HTTP_201_CREATED, data=user)


@router.post("/edit/{user_id}")
def edit_user(
    user_id: int,
    details: schemas.UserDetails,
    service: UserService = Depends(get_user_service),
):
    try:
        user = service.edit_user(user_id, details)
    except SQLAlchemyError as exc:
        logger.exception("Database error while editing user %s", user_id)
        raise errors.ServerError() from exc

    return envelope(status.HTTP_200_OK, data=user)


@router.get("")
def get_user_by_email(
    email: Optional[str] = None,
    service: UserService = Depends(get_user_service),
):
    """Look up a user by exact (percent-decoded) email address."""
    try:
        user = service.get_user_by_email(email)
    except SQLAlchemyError as exc:
        logger.exception("Database error while looking up user by email")
        raise errors.ServerError() from exc

    return envelope(status.HTTP_200_OK, data=user)
