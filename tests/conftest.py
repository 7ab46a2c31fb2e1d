import os

#konfiguracja testowa musi byc ustawiona przed importem app.*
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "1"
os.environ["CELERY_BROKER_URL"] = "memory://"
os.environ["CELERY_RESULT_BACKEND"] = "cache+memory://"

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from app.api import create_app
from app.api.deps import get_product_client
from app.data import models  # noqa: F401
from app.data.database import Base, SessionLocal, engine
from app.domain.schemas import RegisterIn
from app.services.auth_service import AuthService
from app.services.password_hasher import PasswordHasher
from app.services.product_client import ProductClient
from app.services.token_service import TokenService

PIZZA_ID = "0b6f3c1e-5a4d-4f7e-9c1a-2d3e4f5a6b70"
BIRYANI_ID = "1c7a4d2f-6b5e-4a8f-8d2b-3e4f5a6b7c81"
UNKNOWN_ID = "9f9f9f9f-0000-4000-8000-000000000000"

CATALOG = {
    PIZZA_ID: {"id": PIZZA_ID, "name": "Margherita Pizza", "price": {"org": 12.5}},
    BIRYANI_ID: {"id": BIRYANI_ID, "name": "Chicken Biryani", "price": {"org": 9.0}},
}


class FakeProductClient(ProductClient):
    """Katalog w pamieci zamiast HTTP."""

    def __init__(self, products=None):
        super().__init__(base_url="http://catalog.test")
        self.products = dict(CATALOG if products is None else products)
        self.calls = []

    def fetch_product(self, product_id):
        self.calls.append(product_id)
        return self.products.get(product_id)


class FakeNotifier:
    def __init__(self):
        self.sent = []

    def send_order_notification(self, user_id, order_id):
        self.sent.append((user_id, order_id))


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def catalog():
    return FakeProductClient()


@pytest.fixture()
def notifier():
    return FakeNotifier()


@pytest.fixture()
def token_service():
    return TokenService(secret="test-secret", expires_in=timedelta(days=1))


@pytest.fixture()
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture()
def auth_service(db, token_service, hasher):
    return AuthService(db=db, token_service=token_service, password_hasher=hasher)


@pytest.fixture()
def user_id(auth_service):
    result = auth_service.register(
        RegisterIn(email="alice@mail.com", password="secret123", name="Alice")
    )
    return result["user"]["id"]


@pytest.fixture()
def client(catalog):
    app = create_app()
    app.dependency_overrides[get_product_client] = lambda: catalog
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def auth_headers(client):
    resp = client.post(
        "/user/signup",
        json={"email": "a@x.com", "password": "pass123", "name": "A"},
    )
    assert resp.status_code == 201
    return {"Authorization": f"Bearer {resp.json()['token']}"}
