from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

import structlog

from paygate.psp.adapter import FailureKind, IntentCreated, IntentFailed, IntentResult, PSPAdapter
from paygate.psp.stripe_adapter import StripeAdapter
from paygate.schemas_pkg.transactions import TransactionRequest, TransactionResponse

logger = structlog.get_logger(__name__)

SUCCEEDED = "succeeded"


class MissingCredentialError(RuntimeError):
    """Raised at startup when the Stripe secret key is not configured."""


class TransactionService(ABC):
    @abstractmethod
    async def process_transaction(self, request: TransactionRequest) -> TransactionResponse:
        """Process a single validated transaction and return the normalized response."""


class StripeTransactionService(TransactionService):
    """Creates and confirms a Stripe PaymentIntent per transaction."""

    def __init__(self, secret_key: Optional[str], adapter: Optional[PSPAdapter] = None):
        if not secret_key or not secret_key.strip():
            raise MissingCredentialError("STRIPE_SECRET_KEY configuration is missing")
        self.adapter = adapter or StripeAdapter(api_key=secret_key)

    async def process_transaction(self, request: TransactionRequest) -> TransactionResponse:
        try:
            result = await self.adapter.create_payment_intent(
                amount=request.amount,
                currency=request.currency,
                payment_method=request.payment_method_id,
                description=request.description,
                receipt_email=request.customer_email,
                metadata=request.metadata,
            )
        except Exception as e:
            logger.error("transaction_adapter_error", error_type=type(e).__name__, exc_info=True)
            result = IntentFailed(message=f"An unexpected error occurred: {e}", kind=FailureKind.UNEXPECTED)

        response = to_transaction_response(result)

        log = getattr(logger, log_level_for(result))
        log(
            "transaction_processed",
            failure_kind=result.kind.value if isinstance(result, IntentFailed) else None,
            success=response.success,
            payment_intent_id=response.payment_intent_id,
            status=response.status,
        )
        return response


def to_transaction_response(result: IntentResult) -> TransactionResponse:
    if isinstance(result, IntentFailed):
        return TransactionResponse(success=False, error_message=result.message)
    if isinstance(result, IntentCreated):
        # Only "succeeded" counts; requires_action etc. leave the next step to the client
        return TransactionResponse(
            success=result.status == SUCCEEDED,
            payment_intent_id=result.id,
            status=result.status,
            amount=result.amount,
            currency=result.currency,
            client_secret=result.client_secret,
        )
    raise TypeError(f"Unknown intent result: {result!r}")


def log_level_for(result: IntentResult) -> str:
    if isinstance(result, IntentFailed):
        return "error" if result.kind == FailureKind.UNEXPECTED else "warning"
    return "info"
