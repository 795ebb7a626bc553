"""
FastAPI dependencies for dependency injection.

Services get a request-scoped database session; the notifier is a
process-wide singleton chosen from settings.

Pattern: Dependency Injection
- Loose coupling between routers and services
- Easy to test (override get_db or get_notifier)
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from portfolio_app.config import settings
from portfolio_app.database.connection import get_db
from portfolio_app.notifications.factory import NotifierFactory, NotifierBackend
from portfolio_app.notifications.strategies import NotifierStrategy
from portfolio_app.services.analytics_service import AnalyticsService
from portfolio_app.services.contact_service import ContactService
from portfolio_app.services.link_service import LinkService


@lru_cache()
def get_notifier() -> NotifierStrategy:
    """
    Get notifier instance (singleton).
    
    Factory gets config from settings internally.
    @lru_cache ensures this is called only once.
    """
    backend = NotifierBackend(settings.notifier_backend)
    return NotifierFactory.create(backend)


def get_link_service(db: Session = Depends(get_db)) -> LinkService:
    """LinkService (registry + click recorder) bound to the request session"""
    return LinkService(db=db)


def get_analytics_service(db: Session = Depends(get_db)) -> AnalyticsService:
    return AnalyticsService(db=db)


def get_contact_service(db: Session = Depends(get_db)) -> ContactService:
    return ContactService(db=db)
