from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class UserDetails(BaseModel):
    """Body of the create and edit requests.

    Names are checked by the service rather than here so that uniqueness
    conflicts are reported before a bad first or last name.
    """

    model_config = ConfigDict(populate_by_name=True)

    email: StrictStr = Field(min_length=1)
    username: StrictStr = Field(min_length=1)
    first_name: Any = Field(default=None, alias="firstName")
    last_name: Any = Field(default=None, alias="lastName")


class UserOut(BaseModel):
    """Schema used for responses. Never includes the password."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    email: str
    username: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")


class Envelope(BaseModel):
    error: Optional[str] = None
    data: Optional[UserOut] = None
    success: bool


class WelcomeMessage(BaseModel):
    message: str
