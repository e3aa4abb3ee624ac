"""
Stripe transaction routes.
POST {prefix}/transaction creates and confirms a PaymentIntent in one call.
"""
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, status
from fastapi.responses import JSONResponse
import structlog

from ..deps import get_transaction_service
from ..schemas_pkg.transactions import TransactionRequest, TransactionResponse
from ..services.transaction_service import TransactionService

logger = structlog.get_logger(__name__)

DEFAULT_ROUTE_PREFIX = "api/stripe"


def validate_transaction_request(request: TransactionRequest) -> Optional[str]:
    """Return the first validation error, checked in order amount, payment method, currency."""
    if request.amount <= 0:
        return "Amount must be greater than zero"
    if not (request.payment_method_id or "").strip():
        return "PaymentMethodId is required"
    if not (request.currency or "").strip():
        return "Currency is required"
    return None


def transaction_json(response: TransactionResponse, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=response.model_dump(mode="json", by_alias=True))


async def process_transaction(
    request: TransactionRequest,
    transaction_service: TransactionService = Depends(get_transaction_service),
):
    """
    Create and confirm a Stripe payment.

    Returns 200 when the PaymentIntent succeeded, 400 for invalid input
    or any failed/incomplete payment.
    """
    error = validate_transaction_request(request)
    if error:
        logger.warning("transaction_validation_failed", error=error)
        return transaction_json(
            TransactionResponse(success=False, error_message=error),
            status.HTTP_400_BAD_REQUEST,
        )

    response = await transaction_service.process_transaction(request)

    if response.success:
        return transaction_json(response, status.HTTP_200_OK)
    return transaction_json(response, status.HTTP_400_BAD_REQUEST)


def normalize_route_prefix(route_prefix: Optional[str]) -> str:
    """'api/stripe', '/api/stripe/' -> '/api/stripe'; '' or '/' -> ''."""
    if route_prefix is None:
        route_prefix = DEFAULT_ROUTE_PREFIX
    cleaned = route_prefix.strip().strip("/")
    return f"/{cleaned}" if cleaned else ""


def build_transaction_router(route_prefix: Optional[str] = DEFAULT_ROUTE_PREFIX) -> APIRouter:
    router = APIRouter(prefix=normalize_route_prefix(route_prefix), tags=["Stripe Transactions"])
    router.add_api_route(
        "/transaction",
        process_transaction,
        methods=["POST"],
        name="process_stripe_transaction",
        response_model=TransactionResponse,
        responses={
            status.HTTP_400_BAD_REQUEST: {"model": TransactionResponse},
            status.HTTP_500_INTERNAL_SERVER_ERROR: {"description": "Unhandled server error"},
        },
    )
    return router


def include_transaction_routes(app: FastAPI, route_prefix: Optional[str] = DEFAULT_ROUTE_PREFIX) -> APIRouter:
    """Mount the transaction routes on app and return the mounted router."""
    router = build_transaction_router(route_prefix)
    app.include_router(router)
    return router
