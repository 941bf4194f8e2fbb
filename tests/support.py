"""Shared helpers: isolated SQLite databases and an API client wired to them."""

import unittest
from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import get_db
from app.main import app
from app.models import Base, Category, Product
from app.scripts.create_user import create_user
from app.services.products import compute_special_price

PASSWORD = "correct-horse-battery"


def make_session_factory() -> sessionmaker:
    """Fresh in-memory database with every table created."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def add_category(db: Session, name: str) -> Category:
    category = Category(category_name=name)
    db.add(category)
    db.commit()
    return category


def add_product(
    db: Session,
    category: Category,
    name: str,
    price: float = 100.0,
    discount: float = 0.0,
    quantity: int = 10,
) -> Product:
    product = Product(
        product_name=name,
        description="",
        price=price,
        discount=discount,
        special_price=compute_special_price(price, discount),
        quantity=quantity,
        category_id=category.id,
    )
    db.add(product)
    db.commit()
    return product


class DatabaseTestCase(unittest.TestCase):
    """Gives each test its own empty database and an open session."""

    def setUp(self) -> None:
        self.SessionLocal = make_session_factory()
        self.db = self.SessionLocal()

    def tearDown(self) -> None:
        self.db.close()


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient whose get_db uses the test database."""

    def setUp(self) -> None:
        super().setUp()

        def override_get_db() -> Generator[Session, None, None]:
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        app.dependency_overrides.clear()
        super().tearDown()

    def register(self, email: str = "alice@shop.io", password: str = PASSWORD):
        return self.client.post(
            "/api/register",
            json={
                "first_name": "Alice",
                "last_name": "Liddell",
                "mobile_number": "5551234567",
                "email": email,
                "password": password,
            },
        )

    def user_headers(self, email: str = "alice@shop.io") -> dict[str, str]:
        response = self.register(email)
        self.assertEqual(response.status_code, 201, response.text)
        return {"Authorization": f"Bearer {response.json()['jwt-token']}"}

    def admin_headers(self, email: str = "admin@shop.io") -> dict[str, str]:
        create_user(self.db, email, PASSWORD, role="admin")
        response = self.client.post("/api/login", json={"email": email, "password": PASSWORD})
        self.assertEqual(response.status_code, 200, response.text)
        return {"Authorization": f"Bearer {response.json()['jwt-token']}"}
