"""
Test configuration and fixtures for the portfolio backend.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from main import app
from portfolio_app.database.connection import Base, get_db
from portfolio_app.dependencies import get_notifier
from portfolio_app.notifications.strategies import NotifierStrategy
from portfolio_app.services.analytics_service import AnalyticsService
from portfolio_app.services.contact_service import ContactService
from portfolio_app.services.link_id_strategies import UUIDLinkIdStrategy
from portfolio_app.services.link_service import LinkService

# Test database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class RecordingNotifier(NotifierStrategy):
    """Notifier that remembers what it was asked to send"""

    def __init__(self):
        self.sent = []

    async def notify_new_message(self, notification) -> bool:
        self.sent.append(notification)
        return True


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    This ensures tests are isolated and don't affect each other.
    """
    Base.metadata.create_all(bind=engine)
    
    db = TestingSessionLocal()
    
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def notifier():
    return RecordingNotifier()


@pytest.fixture(scope="function")
def client(db_session, notifier):
    """
    Create a test client with database and notifier dependencies overridden.
    This is the main fixture that tests will use.
    """
    def override_get_db():
        yield db_session
    
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notifier] = lambda: notifier
    
    with TestClient(app) as test_client:
        yield test_client
    
    app.dependency_overrides.clear()


@pytest.fixture
def link_service(db_session):
    return LinkService(db_session, link_id_strategy=UUIDLinkIdStrategy())


@pytest.fixture
def analytics_service(db_session):
    return AnalyticsService(db_session)


@pytest.fixture
def contact_service(db_session):
    return ContactService(db_session)
