from sqlalchemy import Column, Integer, String

from .database import Base


class User(Base):
    """A forum member.

    `password_hash` holds the bcrypt hash of a generated password and is never
    part of any API response.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(256), unique=True, nullable=False, index=True)
    username = Column(String(64), unique=True, nullable=False, index=True)
    first_name = Column(String(256), nullable=False)
    last_name = Column(String(256), nullable=False)
    password_hash = Column(String(256), nullable=False)
