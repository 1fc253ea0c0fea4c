import os
import tempfile

# baza testowa musi byc ustawiona przed importem storefront.utils.settings
_TMP_DIR = tempfile.mkdtemp(prefix="storefront-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["SECRET_KEY"] = "test-secret"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

import storefront.data.models  # noqa: F401
from storefront.data.database import Base, SessionLocal, engine
from storefront.data.models import ProductModel, UserModel
from storefront.main import create_app
from storefront.utils.security import get_password_hash

PASSWORD = "Secret123"


@pytest.fixture(autouse=True)
def schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture()
def client():
    return TestClient(create_app())


@pytest.fixture()
def make_user(db):
    def _make(email="alice@example.com", password=PASSWORD, **fields):
        user = UserModel(
            first_name=fields.pop("first_name", "Alice"),
            last_name=fields.pop("last_name", "Smith"),
            email=email,
            password_hash=get_password_hash(password),
            **fields,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture()
def make_product(db):
    def _make(name="T-shirt", price="10.00", stock_quantity=10, **fields):
        product = ProductModel(
            name=name,
            price=Decimal(price),
            stock_quantity=stock_quantity,
            **fields,
        )
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make


@pytest.fixture()
def auth_headers(client, make_user):
    """Naglowki z tokenem zalogowanego uzytkownika."""
    user = make_user(email="staff@example.com")
    response = client.post("/login", json={"email": user.email, "password": PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
