import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from payu_bridge.dto.error import ErrorResponse
from payu_bridge.router.routes_health import router as health_router
from payu_bridge.router.routes_payments import router as payments_router
from payu_bridge.utils.config import Settings
from payu_bridge.utils.enums import ErrorKind
from payu_bridge.utils.errors import ERROR_MESSAGES, PaymentAPIError
from payu_bridge.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error.model_dump(by_alias=True, exclude_none=True))


async def payment_error_handler(_: Request, exc: PaymentAPIError) -> JSONResponse:
    return _error_response(
        exc.status_code,
        ErrorResponse(message=exc.message, error_code=exc.kind, error=exc.detail),
    )


async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected malformed request body: %s", exc.errors())
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(
            message=ERROR_MESSAGES[ErrorKind.INVALID_REQUEST_BODY],
            error_code=ErrorKind.INVALID_REQUEST_BODY,
        ),
    )


async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = "Endpoint not found" if exc.status_code == status.HTTP_404_NOT_FOUND else str(exc.detail)
    return _error_response(exc.status_code, ErrorResponse(message=message))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Server error")
    settings: Settings = request.app.state.settings
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(
            message=ERROR_MESSAGES[ErrorKind.INTERNAL_ERROR],
            error_code=ErrorKind.INTERNAL_ERROR,
            error=None if settings.is_production else str(exc),
        ),
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        configure_logging(settings.log_level)
        logger.info(
            "Payment server starting. environment=%s frontend_url=%s payu_url=%s merchant_key=%s",
            settings.app_env,
            settings.resolved_frontend_url,
            settings.payu_base_url,
            settings.payu_merchant_key,
        )
        yield
        logger.info("Payment server stopped")

    app = FastAPI(title="PayU Payment Bridge", lifespan=lifespan)
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(PaymentAPIError, payment_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
    app.include_router(health_router)
    app.include_router(payments_router)
    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)
