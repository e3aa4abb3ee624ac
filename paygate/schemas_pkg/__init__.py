# paygate/schemas_pkg/__init__.py

from .transactions import (
    TransactionRequest,
    TransactionResponse,
    HealthResponse,
)

__all__ = [
    "TransactionRequest",
    "TransactionResponse",
    "HealthResponse",
]
