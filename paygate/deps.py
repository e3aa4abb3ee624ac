from fastapi import Request

from .services.transaction_service import TransactionService


def get_transaction_service(request: Request) -> TransactionService:
    """
    Dependency returning the service built by create_app().
    Tests swap it through app.dependency_overrides.
    """
    return request.app.state.transaction_service
