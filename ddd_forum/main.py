import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from . import errors
from . import models  # noqa: F401  registers the users table
from .config import settings
from .database import Base, engine
from .responses import envelope
from .routers import users as users_routes
from .schemas import WelcomeMessage

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup() -> None:
    # Create tables on startup so the app is immediately usable.
    Base.metadata.create_all(bind=engine)


@app.exception_handler(errors.UserDirectoryError)
async def user_directory_error_handler(request: Request, exc: errors.UserDirectoryError):
    return envelope(exc.status_code, error=exc.code)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return envelope(status.HTTP_400_BAD_REQUEST, error=errors.ValidationError.code)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled application error", exc_info=exc)
    return envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, error=errors.ServerError.code)


@app.get("/", response_model=WelcomeMessage)
def root():
    return {"message": "Welcome to the DDD-Forum API"}


app.include_router(users_routes.router)
