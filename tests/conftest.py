import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from decimal import Decimal
import os

import app.models  # noqa: F401
from app.database import Base, get_db, json_serializer
from app.main import app
from app.models.wallet import Wallet
from app.models.offer import Offer

# In-memory SQLite unless TEST_DATABASE_URL points at a real server
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite://")


def _create_test_engine():
    if not TEST_DATABASE_URL.startswith("sqlite"):
        return create_engine(TEST_DATABASE_URL, pool_pre_ping=True, json_serializer=json_serializer)

    test_engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        json_serializer=json_serializer,
    )

    @event.listens_for(test_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return test_engine


@pytest.fixture(scope="function")
def engine():
    """Fresh schema for every test."""
    test_engine = _create_test_engine()
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def client(db_session):
    """
    Create a TestClient that uses the test database session.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Don't close, db_session fixture handles it

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def make_wallet(db_session):
    """Factory inserting a wallet with sensible defaults."""
    def _make_wallet(address, **fields):
        wallet = Wallet(address=address, **fields)
        db_session.add(wallet)
        db_session.commit()
        db_session.refresh(wallet)
        return wallet
    return _make_wallet


@pytest.fixture
def sample_wallet(make_wallet):
    """Create a sample wallet for testing."""
    return make_wallet(
        "0x1234567890abcdef1234567890abcdef12345678",
        eth_balance=Decimal("25.5"),
        steth_balance=Decimal("12.3"),
        total_value_usd=Decimal("108643.50"),
        preferences={"activities": ["staking", "lending"], "region": "EU"},
        available_capital_min=Decimal("5000"),
        available_capital_max=Decimal("50000"),
        badges=["top-holder"],
    )


@pytest.fixture
def make_offer(db_session):
    def _make_offer(target_wallet, **fields):
        values = {
            "title": "Stake 10 ETH for 30 days",
            "description": "Earn a $500 bonus",
            "offer_type": "cash",
            "category": "defi",
        }
        values.update(fields)
        offer = Offer(target_wallet_id=target_wallet.id, **values)
        db_session.add(offer)
        db_session.commit()
        db_session.refresh(offer)
        return offer
    return _make_offer


@pytest.fixture
def sample_offer(make_offer, sample_wallet):
    """Create an active offer targeting sample_wallet."""
    return make_offer(
        sample_wallet,
        from_anonymous_tag="Protocol Alpha",
        reward_value=Decimal("500"),
        contact_info="alpha@protocol.com",
    )
