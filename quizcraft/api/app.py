"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from quizcraft import __version__
from quizcraft.api import generation, quizzes
from quizcraft.config.logging import configure_logging
from quizcraft.config.settings import get_settings
from quizcraft.errors import QuizcraftError

logger = logging.getLogger(__name__)


async def handle_quizcraft_error(request: Request, exc: QuizcraftError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first["loc"] if part != "body")
        message = f"Invalid {field}: {first['msg']}" if field else f"Invalid request: {first['msg']}"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


def create_app() -> FastAPI:
    """
    Build the API application.

    Returns:
        FastAPI app with the generation and quiz routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Quizcraft API", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(QuizcraftError, handle_quizcraft_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    app.include_router(generation.router)
    app.include_router(quizzes.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
