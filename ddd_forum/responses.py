from typing import Optional

from fastapi.responses import JSONResponse

from . import models, schemas


def envelope(
    status_code: int,
    data: Optional[models.User] = None,
    error: Optional[str] = None,
) -> JSONResponse:
    """Render the {error, data, success} envelope, omitting unset keys."""
    body = schemas.Envelope(
        error=error,
        data=schemas.UserOut.model_validate(data) if data is not None else None,
        success=error is None,
    )
    return JSONResponse(
        body.model_dump(by_alias=True, exclude_none=True),
        status_code=status_code,
    )
