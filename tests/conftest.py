# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from database import Database
from main import create_app
from models.product import Product, Timestamp
from services.product_service import ProductService


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "products.db"


@pytest.fixture
def database(db_path):
    db = Database(f"sqlite:///{db_path}", timeout=5)
    db.create_database()
    yield db
    db.close()


@pytest.fixture
def service(database):
    return ProductService(database)


@pytest.fixture
def api_client(database):
    app = create_app(database)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def potato():
    return Product(
        name="Potato",
        price="5€",
        creator="Marty",
        unit="Kg",
        category="vegetable",
        description="Buy my Potato",
        date=Timestamp(seconds=1700000000, nanos=123456789),
    )
