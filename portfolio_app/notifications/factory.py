"""
Factory for creating notifier instances.
Simple, clean factory with singleton caching.
"""

from enum import Enum
from .strategies import NotifierStrategy, ConsoleNotifier, NullNotifier
from portfolio_app.config import settings


class NotifierBackend(Enum):
    """Available notifier backends"""
    CONSOLE = "console"
    NULL = "null"


class NotifierFactory:
    """
    Simple factory for creating notifier instances.
    
    Gets configuration from settings (not passed as parameters).
    """
    
    _instance: NotifierStrategy = None  # Single cached instance
    
    @classmethod
    def create(cls, backend: NotifierBackend) -> NotifierStrategy:
        """
        Create or return cached notifier instance.
        
        Args:
            backend: Type of notifier backend (from enum)
            
        Returns:
            Singleton notifier instance
        """
        if cls._instance is not None:
            return cls._instance
        
        if backend == NotifierBackend.CONSOLE:
            cls._instance = ConsoleNotifier(admin_email=settings.admin_email)
            print("✅ Console notifier initialized")
            
        elif backend == NotifierBackend.NULL:
            cls._instance = NullNotifier()
            print("✅ Null notifier initialized")
            
        else:
            raise ValueError(f"Unknown notifier backend: {backend}")
        
        return cls._instance
    
    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
