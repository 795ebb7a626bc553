"""
Notification module for new contact messages.
Implements Strategy Pattern for flexible notifier backends.
"""

from .strategies import NotifierStrategy, ConsoleNotifier, NullNotifier, notify_safely
from .factory import NotifierFactory, NotifierBackend
from .models import ContactNotification

__all__ = [
    "NotifierStrategy",
    "ConsoleNotifier",
    "NullNotifier",
    "notify_safely",
    "NotifierFactory",
    "NotifierBackend",
    "ContactNotification",
]
