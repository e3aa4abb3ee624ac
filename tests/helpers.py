from types import SimpleNamespace
from typing import List

from paygate.config import Settings
from paygate.schemas_pkg.transactions import TransactionRequest, TransactionResponse
from paygate.services.transaction_service import TransactionService

TEST_SECRET_KEY = "sk_test_placeholder_for_validation_test"


def make_settings(**overrides) -> Settings:
    values = {
        "STRIPE_SECRET_KEY": TEST_SECRET_KEY,
        "ENVIRONMENT": "test",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class StubTransactionService(TransactionService):
    """Records every request and answers with a canned response."""

    def __init__(self, response: TransactionResponse = None):
        self.response = response or TransactionResponse(
            success=True,
            payment_intent_id="pi_stub_123",
            status="succeeded",
            amount=1000,
            currency="usd",
            client_secret="pi_stub_123_secret_abc",
        )
        self.requests: List[TransactionRequest] = []

    async def process_transaction(self, request: TransactionRequest) -> TransactionResponse:
        self.requests.append(request)
        return self.response


class ExplodingTransactionService(TransactionService):
    async def process_transaction(self, request: TransactionRequest) -> TransactionResponse:
        raise RuntimeError("boom")


def fake_intent(status="succeeded", amount=2000, currency="usd", intent_id="pi_test_001"):
    return SimpleNamespace(
        id=intent_id,
        status=status,
        amount=amount,
        currency=currency,
        client_secret=f"{intent_id}_secret_xyz",
    )
