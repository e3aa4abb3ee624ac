from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TransactionRequest(BaseModel):
    """Payment to create and confirm in one call."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    amount: int = Field(default=0, description="Amount in smallest currency unit (e.g., 1000 = $10.00)")
    currency: Optional[str] = Field(default="usd", description="Three-letter ISO currency code")
    payment_method_id: Optional[str] = Field(default="", description="Payment method ID from Stripe.js")
    description: Optional[str] = None
    customer_email: Optional[str] = Field(None, description="Receipt email address")
    metadata: Optional[Dict[str, str]] = Field(None, description="Key-value pairs attached to the intent")


class TransactionResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool
    payment_intent_id: Optional[str] = None
    # succeeded, requires_action, requires_payment_method, ...
    status: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    error_message: Optional[str] = None
    # Needed by the client for 3D Secure and other follow-up actions
    client_secret: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
