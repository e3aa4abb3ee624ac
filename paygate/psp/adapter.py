"""
PSP Adapter Base Class and Interface.
Provides the payment-intent call the transaction service depends on.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


class FailureKind(str, Enum):
    PROVIDER = "provider"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class IntentCreated:
    id: str
    status: str
    amount: int
    currency: str
    client_secret: Optional[str] = None


@dataclass(frozen=True)
class IntentFailed:
    message: str
    kind: FailureKind = FailureKind.PROVIDER


IntentResult = Union[IntentCreated, IntentFailed]


class PSPAdapter(ABC):
    """
    Base adapter for Payment Service Providers.
    Provider errors never escape an adapter: they come back as IntentFailed.
    """

    @abstractmethod
    async def create_payment_intent(
        self,
        amount: int,
        currency: str,
        payment_method: str,
        description: Optional[str] = None,
        receipt_email: Optional[str] = None,
        metadata: Optional[Dict[str, str]] = None,
    ) -> IntentResult:
        """
        Create and immediately confirm a payment intent.

        Args:
            amount: Amount in smallest currency unit (e.g., cents)
            currency: ISO currency code (e.g., "usd")
            payment_method: Tokenized payment method reference
            description: Optional description shown on the payment
            receipt_email: Where the provider sends the receipt
            metadata: Key-value pairs attached verbatim when non-empty

        Returns:
            IntentCreated with the provider's fields, or IntentFailed
        """
