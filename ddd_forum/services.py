import logging
import secrets
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError

from . import errors, models, schemas
from .repository import UserRepository
from .security import hash_password

logger = logging.getLogger(__name__)

GENERATED_PASSWORD_BYTES = 12


def generate_password() -> str:
    return secrets.token_urlsafe(GENERATED_PASSWORD_BYTES)


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


class UserService:
    """Create, edit and look up users.

    The repository is passed in so tests can substitute a double for the
    database-backed one.
    """

    def __init__(self, repository: UserRepository):
        self.repository = repository

    def create_user(self, details: schemas.UserDetails) -> models.User:
        self._validate(details)

        user = models.User(
            email=details.email,
            username=details.username,
            first_name=details.first_name,
            last_name=details.last_name,
            password_hash=hash_password(generate_password()),
        )
        try:
            user = self.repository.add(user)
        except IntegrityError:
            # Lost a race with a concurrent write; report which key collided.
            self._check_uniqueness(details)
            raise

        logger.info("Created user %s (%s)", user.id, user.username)
        return user

    def edit_user(self, user_id: int, details: schemas.UserDetails) -> models.User:
        user = self.repository.get(user_id)
        if user is None:
            logger.info("Edit rejected: user %s does not exist", user_id)
            raise errors.UserNotFound()

        self._validate(details, exclude_id=user_id)

        user.email = details.email
        user.username = details.username
        user.first_name = details.first_name
        user.last_name = details.last_name
        try:
            user = self.repository.save(user)
        except IntegrityError:
            self._check_uniqueness(details, exclude_id=user_id)
            raise

        logger.info("Updated user %s", user_id)
        return user

    def get_user_by_email(self, email: Optional[str]) -> models.User:
        """Look up a user by exact email.

        `email` arrives already percent-decoded by the HTTP layer and is not
        decoded again, so stored addresses containing a literal `%` still match.
        """
        if not email:
            raise errors.ValidationError("email is required")

        user = self.repository.get_by_email(email)
        if user is None:
            raise errors.UserNotFound()
        return user

    def _validate(
        self, details: schemas.UserDetails, exclude_id: Optional[int] = None
    ) -> None:
        """Run the checks shared by create and edit, in order.

        Uniqueness is checked against every record except `exclude_id`, so an
        edit may keep the user's own email and username.
        """
        self._check_uniqueness(details, exclude_id=exclude_id)

        if not _is_non_empty_string(details.first_name):
            logger.info("Rejected user details: invalid firstName")
            raise errors.ValidationError("firstName must be a non-empty string")
        if not _is_non_empty_string(details.last_name):
            logger.info("Rejected user details: invalid lastName")
            raise errors.ValidationError("lastName must be a non-empty string")

    def _check_uniqueness(
        self, details: schemas.UserDetails, exclude_id: Optional[int] = None
    ) -> None:
        existing = self.repository.get_by_username(details.username)
        if existing is not None and existing.id != exclude_id:
            logger.info("Rejected user details: username %r taken", details.username)
            raise errors.UsernameAlreadyTaken()

        existing = self.repository.get_by_email(details.email)
        if existing is not None and existing.id != exclude_id:
            logger.info("Rejected user details: email %r in use", details.email)
            raise errors.EmailAlreadyInUse()
