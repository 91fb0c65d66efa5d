"""Error taxonomy shared by the service and the HTTP layer.

Every error carries the code reported in the response envelope and the HTTP
status it maps to. Refer to these through the module (``errors.ValidationError``)
so they are not confused with pydantic's ``ValidationError``.
"""

from fastapi import status


class UserDirectoryError(Exception):
    code = "ServerError"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = ""):
        super().__init__(message or self.code)


class UsernameAlreadyTaken(UserDirectoryError):
    code = "UsernameAlreadyTaken"
    status_code = status.HTTP_409_CONFLICT


class EmailAlreadyInUse(UserDirectoryError):
    code = "EmailAlreadyInUse"
    status_code = status.HTTP_409_CONFLICT


class ValidationError(UserDirectoryError):
    code = "ValidationError"
    status_code = status.HTTP_400_BAD_REQUEST


class UserNotFound(UserDirectoryError):
    code = "UserNotFound"
    status_code = status.HTTP_404_NOT_FOUND


class ServerError(UserDirectoryError):
    pass
