from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time
import logging

from app.core.exceptions import BusinessRuleViolation, DomainError, NotFound
from app.shared.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

def _error_response(status_code: int, exc: DomainError) -> JSONResponse:
    body = ErrorResponse(message=exc.message, error_code=exc.error_code)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))

def setup_middleware(app: FastAPI):
    """Configure all middleware for the application"""

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure properly for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request, call_next):
        start_time = time.time()

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            f"{request.method} {request.url.path} - "
            f"Status: {response.status_code} - "
            f"Time: {process_time:.4f}s"
        )

        return response

def setup_exception_handlers(app: FastAPI):
    """Traducir errores de dominio a respuestas HTTP"""

    @app.exception_handler(NotFound)
    async def not_found_handler(request: Request, exc: NotFound):
        return _error_response(status.HTTP_404_NOT_FOUND, exc)

    @app.exception_handler(BusinessRuleViolation)
    async def business_rule_handler(request: Request, exc: BusinessRuleViolation):
        return _error_response(status.HTTP_412_PRECONDITION_FAILED, exc)
