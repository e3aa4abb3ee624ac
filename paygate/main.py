# paygate/main.py

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from paygate.config import Settings, settings as default_settings
from paygate.logging_config import get_logger
from paygate.middleware import request_id_middleware
from paygate.routers import health
from paygate.routers.stripe_transactions import include_transaction_routes
from paygate.schemas_pkg.transactions import TransactionResponse
from paygate.services.transaction_service import StripeTransactionService, TransactionService

logger = get_logger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies get the transaction error shape with a 400, not FastAPI's 422."""
    errors = exc.errors()
    detail = errors[0].get("msg", "malformed payload") if errors else "malformed payload"
    logger.warning("request_body_invalid", error_count=len(errors))
    body = TransactionResponse(success=False, error_message=f"Invalid request body: {detail}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(mode="json", by_alias=True),
    )


def create_app(
    settings: Optional[Settings] = None,
    transaction_service: Optional[TransactionService] = None,
    route_prefix: Optional[str] = None,
) -> FastAPI:
    """
    Build the application.

    Raises MissingCredentialError when no service is supplied and
    STRIPE_SECRET_KEY is not configured.
    """
    if settings is None:
        settings = default_settings

    # ---------------------------------------------
    # SERVICES
    # ---------------------------------------------
    if transaction_service is None:
        transaction_service = StripeTransactionService(settings.STRIPE_SECRET_KEY)

    if route_prefix is None:
        route_prefix = settings.STRIPE_ROUTE_PREFIX

    # ---------------------------------------------
    # APP INIT
    # ---------------------------------------------
    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
    )
    app.state.transaction_service = transaction_service

    # ---------------------------------------------
    # MIDDLEWARE
    # ---------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_id_middleware)

    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # ---------------------------------------------
    # ROUTERS
    # ---------------------------------------------
    app.include_router(health.router, tags=["Health"])
    include_transaction_routes(app, route_prefix)

    logger.info(
        "application_created",
        environment=settings.ENVIRONMENT,
        route_prefix=route_prefix,
        service=type(transaction_service).__name__,
    )
    return app
