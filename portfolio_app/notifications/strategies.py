"""
Notifier strategies using Strategy Pattern.
Allows switching how the site owner hears about new contact messages.

Actual e-mail delivery lives outside this service; the console notifier
is the hook a mail relay or log shipper picks up.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .models import ContactNotification


class NotifierStrategy(ABC):
    """
    Abstract base class for notifier strategies.
    
    All methods are async because real notifiers do network I/O.
    """
    
    @abstractmethod
    async def notify_new_message(self, notification: ContactNotification) -> bool:
        """
        Announce a newly stored contact message.
        
        Args:
            notification: Fields of the stored message
            
        Returns:
            True if the notification was handed off
        """
        pass


class ConsoleNotifier(NotifierStrategy):
    """Writes a one-line summary of each new message to stdout"""
    
    def __init__(self, admin_email: Optional[str] = None):
        self.admin_email = admin_email
    
    async def notify_new_message(self, notification: ContactNotification) -> bool:
        recipient = self.admin_email or notification.email
        print(
            f"📧 Portfolio Contact: {notification.subject} "
            f"(from {notification.name} <{notification.email}>, "
            f"message #{notification.id}) -> {recipient}"
        )
        return True


class NullNotifier(NotifierStrategy):
    """
    Null Object Pattern - notifier that does nothing.
    
    Used for tests and environments where nobody should be notified.
    """
    
    async def notify_new_message(self, notification: ContactNotification) -> bool:
        return True


async def notify_safely(notifier: NotifierStrategy, notification: ContactNotification) -> bool:
    """
    Fire-and-forget wrapper: a failing notifier is logged, never raised.
    
    Returns:
        Whatever the notifier returned, or False if it raised
    """
    try:
        return await notifier.notify_new_message(notification)
    except Exception as e:
        print(f"❌ Notification error for message #{notification.id}: {e}")
        return False
