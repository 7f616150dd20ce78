"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Callable, Generator, Optional
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from insights_gateway.api.main import create_app
from insights_gateway.infrastructure.database.models import Base
from insights_gateway.infrastructure.database.session import get_db
from insights_gateway.domain.models import Direction, Transaction


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def make_transaction() -> Callable[..., Transaction]:
    """Factory for expense transactions with overridable fields"""

    def _make(
        day: date,
        amount: float,
        merchant: Optional[str] = None,
        primary: Optional[str] = None,
        detailed: Optional[str] = None,
        direction: Direction = Direction.EXPENSE,
        description: str = "",
    ) -> Transaction:
        return Transaction(
            date=day,
            direction=direction,
            amount=amount,
            currency="USD",
            primary_category=primary,
            detailed_category=detailed,
            merchant=merchant,
            description=description,
        )

    return _make


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Six months of salary, rent, a streaming subscription and groceries"""
    transactions = []

    for month in range(1, 7):
        transactions.append(
            Transaction(
                date=date(2024, month, 1),
                direction=Direction.INCOME,
                amount=3000.0,
                primary_category="INCOME",
                detailed_category="INCOME_WAGES",
                merchant="Employer",
                description="Salary Deposit",
            )
        )
        transactions.append(
            Transaction(
                date=date(2024, month, 3),
                direction=Direction.EXPENSE,
                amount=1200.0,
                primary_category="RENT_AND_UTILITIES",
                detailed_category="RENT_AND_UTILITIES_RENT",
                merchant="Landlord",
                description="Monthly rent",
            )
        )
        transactions.append(
            Transaction(
                date=date(2024, month, 5),
                direction=Direction.EXPENSE,
                amount=9.99,
                primary_category="ENTERTAINMENT",
                detailed_category="ENTERTAINMENT_TV_AND_MOVIES",
                merchant="NETFLIX",
                description="NETFLIX.COM",
            )
        )
        transactions.append(
            Transaction(
                date=date(2024, month, 12),
                direction=Direction.EXPENSE,
                amount=100.0 * month,  # groceries grow every month
                primary_category="FOOD_AND_DRINK",
                detailed_category="FOOD_AND_DRINK_GROCERIES",
                merchant=f"Supermarket {month}",
                description="Groceries",
            )
        )

    return transactions
