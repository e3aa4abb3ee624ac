import unittest

from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient

from paygate.deps import get_transaction_service
from paygate.main import create_app
from paygate.routers.stripe_transactions import include_transaction_routes, normalize_route_prefix
from tests.helpers import StubTransactionService, make_settings

ZERO_AMOUNT = {"amount": 0, "currency": "usd", "paymentMethodId": "pm_card_visa"}


def client_with_prefix(route_prefix):
    app = create_app(
        settings=make_settings(),
        transaction_service=StubTransactionService(),
        route_prefix=route_prefix,
    )
    return TestClient(app)


class TestRouteConfiguration(unittest.TestCase):
    def test_default_route(self):
        res = client_with_prefix("api/stripe").post("/api/stripe/transaction", json=ZERO_AMOUNT)
        self.assertEqual(res.status_code, 400)
        self.assertIn("Amount", res.json()["errorMessage"])

    def test_default_prefix_comes_from_settings(self):
        app = create_app(settings=make_settings(), transaction_service=StubTransactionService())
        res = TestClient(app).post("/api/stripe/transaction", json=ZERO_AMOUNT)
        self.assertEqual(res.status_code, 400)

    def test_prefix_setting_is_used(self):
        app = create_app(
            settings=make_settings(STRIPE_ROUTE_PREFIX="/billing/v2/"),
            transaction_service=StubTransactionService(),
        )
        res = TestClient(app).post("/billing/v2/transaction", json=ZERO_AMOUNT)
        self.assertEqual(res.status_code, 400)

    def test_custom_route_prefix(self):
        client = client_with_prefix("payments/stripe")
        res = client.post("/payments/stripe/transaction", json=ZERO_AMOUNT)
        self.assertEqual(res.status_code, 400)
        self.assertIn("Amount", res.json()["errorMessage"])

        self.assertEqual(client.post("/api/stripe/transaction", json=ZERO_AMOUNT).status_code, 404)

    def test_custom_prefix_behaves_like_default(self):
        valid = {"amount": 1000, "currency": "usd", "paymentMethodId": "pm_card_visa"}
        default = client_with_prefix("api/stripe").post("/api/stripe/transaction", json=valid)
        custom = client_with_prefix("payments/stripe").post("/payments/stripe/transaction", json=valid)
        self.assertEqual(default.status_code, 200)
        self.assertEqual(custom.status_code, 200)
        self.assertEqual(default.json(), custom.json())

    def test_root_level_route(self):
        res = client_with_prefix("").post("/transaction", json=ZERO_AMOUNT)
        self.assertEqual(res.status_code, 400)
        self.assertIn("Amount", res.json()["errorMessage"])

    def test_wrong_path_is_not_found(self):
        res = client_with_prefix("api/stripe").post(
            "/wrong/path/transaction",
            json={"amount": 1000, "currency": "usd", "paymentMethodId": "pm_card_visa"},
        )
        self.assertEqual(res.status_code, 404)

    def test_get_on_transaction_is_not_allowed(self):
        res = client_with_prefix("api/stripe").get("/api/stripe/transaction")
        self.assertEqual(res.status_code, 405)

    def test_include_transaction_routes_returns_router(self):
        app = FastAPI()
        router = include_transaction_routes(app)
        self.assertIsInstance(router, APIRouter)
        app.dependency_overrides[get_transaction_service] = lambda: StubTransactionService()

        res = TestClient(app).post("/api/stripe/transaction", json=ZERO_AMOUNT)
        self.assertEqual(res.status_code, 400)
        self.assertIn("/api/stripe/transaction", app.openapi()["paths"])

    def test_normalize_route_prefix(self):
        self.assertEqual(normalize_route_prefix("api/stripe"), "/api/stripe")
        self.assertEqual(normalize_route_prefix("/api/stripe/"), "/api/stripe")
        self.assertEqual(normalize_route_prefix(""), "")
        self.assertEqual(normalize_route_prefix("/"), "")
        self.assertEqual(normalize_route_prefix(None), "/api/stripe")


if __name__ == "__main__":
    unittest.main()
