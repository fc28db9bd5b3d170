"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from configurator.application.config import ConfigError


class UnknownDimensionError(Exception):
    """Raised when a request names a dimension that does not exist."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown dimension: {name}. Available: {', '.join(available)}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(UnknownDimensionError)
    async def unknown_dimension_handler(
        request: Request, exc: UnknownDimensionError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": f"Unknown dimension: {exc.name}",
                "error_type": "not_found",
                "details": {"dimension": exc.name, "available": exc.available},
            },
        )
