"""FastAPI application factory."""

import logging
from typing import TypeVar

from fastapi import FastAPI, Query, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from exercise_tracker.api.schemas import (
    CreateUserRequest,
    ExerciseRequest,
    ExerciseResponse,
    LogResponse,
    UserResponse,
)
from exercise_tracker.app_logging import configure_logging
from exercise_tracker.config import parse_cors_origins
from exercise_tracker.containers import AppContainer
from exercise_tracker.domain.errors import NotFoundError, ValidationError

WELCOME_TEXT = "Welcome to the Exercise Tracker API!"

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Exercise Tracker")
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_allow_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message}
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": exc.message}
        )

    @app.get("/", response_class=PlainTextResponse)
    async def index() -> str:
        """Welcome text."""
        return WELCOME_TEXT

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/api/users")
    async def create_user(request: Request) -> UserResponse:
        """Create a user, or return the existing one with that username."""
        state_container: AppContainer = request.app.state.container
        body = await _read_body(request, CreateUserRequest)
        user, _ = state_container.user_service.create_user(body.username)
        return UserResponse.from_record(user)

    @app.get("/api/users")
    async def list_users(request: Request) -> list[UserResponse]:
        """Return every user in creation order."""
        state_container: AppContainer = request.app.state.container
        return [
            UserResponse.from_record(user)
            for user in state_container.user_service.list_users()
        ]

    @app.post("/api/users/{user_id}/exercises")
    async def add_exercise(user_id: str, request: Request) -> ExerciseResponse:
        """Append an exercise to a user's log."""
        state_container: AppContainer = request.app.state.container
        body = await _read_body(request, ExerciseRequest)
        user, exercise = state_container.exercise_service.add_exercise(
            user_id,
            description=body.description,
            duration=body.duration,
            date_value=body.date,
        )
        return ExerciseResponse.from_records(user, exercise)

    @app.get("/api/users/{user_id}/logs")
    async def get_logs(
        user_id: str,
        request: Request,
        from_: str | None = Query(default=None, alias="from"),
        to: str | None = None,
        limit: str | None = None,
    ) -> LogResponse:
        """Return a user's log filtered by date range and limit."""
        state_container: AppContainer = request.app.state.container
        exercise_log = state_container.exercise_service.get_logs(
            user_id, from_=from_, to=to, limit=limit
        )
        return LogResponse.from_log(exercise_log)

    return app


async def _read_body(request: Request, model: type[RequestModel]) -> RequestModel:
    """Parse a JSON or form body into a request model."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError as exc:
            raise ValidationError("Invalid request body") from exc
        if not isinstance(payload, dict):
            raise ValidationError("Invalid request body")
    else:
        form = await request.form()
        payload = dict(form)
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError("Invalid request body") from exc
