from fastapi import FastAPI, Request, status, HTTPException
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from datetime import datetime, timezone
from typing import Optional
import logging

from string_analyzer import config
from string_analyzer.api.routes import router
from string_analyzer.errors import (
    ConflictError,
    ConflictingQueryError,
    FilterValidationError,
    InvalidInputError,
    NotFoundError,
    StringAnalyzerError,
    UnparseableQueryError,
)
from string_analyzer.store import StringStore

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

HTTP_422_UNPROCESSABLE = 422

ERROR_STATUS_CODES = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    FilterValidationError: status.HTTP_400_BAD_REQUEST,
    UnparseableQueryError: status.HTTP_400_BAD_REQUEST,
    ConflictingQueryError: HTTP_422_UNPROCESSABLE,
}


def status_code_for(exc: StringAnalyzerError) -> int:
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return status.HTTP_400_BAD_REQUEST


def create_app(store: Optional[StringStore] = None) -> FastAPI:
    """Build the application around its own (or the given) in-memory store."""
    app = FastAPI(
        title=config.APP_TITLE,
        description="Analyze strings and store their properties, keyed by content",
        version=config.APP_VERSION
    )
    app.state.store = store if store is not None else StringStore()

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, tags=["strings"])

    @app.get("/")
    def root():
        """Root endpoint"""
        return {
            "message": config.APP_TITLE,
            "version": config.APP_VERSION,
            "endpoints": {
                "POST /strings": "Analyze and store a string",
                "GET /strings/{string_value}": "Get specific string analysis",
                "GET /strings": "Get all strings with optional filters",
                "GET /strings/filter-by-natural-language": "Filter using natural language",
                "DELETE /strings/{string_value}": "Delete a string",
                "GET /docs": "API documentation"
            }
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    # Expected outcomes of the core (conflict, not found, bad filters, ...)
    @app.exception_handler(StringAnalyzerError)
    async def string_analyzer_exception_handler(request: Request, exc: StringAnalyzerError):
        return JSONResponse(
            status_code=status_code_for(exc),
            content={"error": exc.message}
        )

    # Validation error handler
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = {}
        wrong_type = False
        for error in exc.errors():
            field = error['loc'][-1]
            errors[field] = error['msg']
            if error['type'] == 'string_type':
                wrong_type = True

        if wrong_type:
            return JSONResponse(
                status_code=HTTP_422_UNPROCESSABLE,
                content={
                    "error": 'Invalid data type for "value" (must be string)',
                    "details": errors
                }
            )

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request body or missing 'value' field",
                "details": errors
            }
        )

    # HTTPException handler
    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)}
        )

    # Generic error handler
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {str(exc)}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error"
            }
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("string_analyzer.main:app", host=config.HOST, port=config.PORT, reload=True)
