"""Stripe PSP Adapter Implementation."""
from typing import Any, Dict, Optional

import stripe
import structlog

from .adapter import FailureKind, IntentCreated, IntentFailed, IntentResult, PSPAdapter

logger = structlog.get_logger(__name__)


class StripeAdapter(PSPAdapter):
    """Stripe payment gateway adapter."""

    def __init__(self, api_key: str):
        # Passed per request so the SDK's module-level stripe.api_key stays untouched
        self._api_key = api_key

    @staticmethod
    def build_intent_params(
        amount: int,
        currency: str,
        payment_method: str,
        description: Optional[str] = None,
        receipt_email: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "amount": amount,
            "currency": currency,
            "payment_method": payment_method,
            "confirm": True,
            "automatic_payment_methods": {
                "enabled": True,
                "allow_redirects": "never",
            },
        }
        if description is not None:
            params["description"] = description
        if receipt_email is not None:
            params["receipt_email"] = receipt_email
        if metadata:
            params["metadata"] = dict(metadata)
        return params

    async def create_payment_intent(
        self,
        amount: int,
        currency: str,
        payment_method: str,
        description: Optional[str] = None,
        receipt_email: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
    ) -> IntentResult:
        """Create and confirm a Stripe payment intent."""
        params = self.build_intent_params(
            amount=amount,
            currency=currency,
            payment_method=payment_method,
            description=description,
            receipt_email=receipt_email,
            metadata=metadata,
        )
        try:
            intent = await stripe.PaymentIntent.create_async(api_key=self._api_key, **params)
        except stripe.StripeError as e:
            logger.warning(
                "stripe_payment_intent_failed",
                error_type=type(e).__name__,
                error_code=getattr(e, "code", None),
                amount=amount,
                currency=currency,
            )
            return IntentFailed(message=e.user_message or str(e), kind=FailureKind.PROVIDER)
        except Exception as e:
            logger.error(
                "stripe_payment_intent_error",
                error_type=type(e).__name__,
                amount=amount,
                currency=currency,
                exc_info=True,
            )
            return IntentFailed(message=f"An unexpected error occurred: {e}", kind=FailureKind.UNEXPECTED)

        logger.info(
            "stripe_payment_intent_created",
            payment_intent_id=intent.id,
            status=intent.status,
            amount=intent.amount,
            currency=intent.currency,
        )
        return IntentCreated(
            id=intent.id,
            status=intent.status,
            amount=intent.amount,
            currency=intent.currency,
            client_secret=intent.client_secret,
        )
