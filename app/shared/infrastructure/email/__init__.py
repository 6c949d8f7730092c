"""
Transactional email: template rendering, delivery and notification helpers.
"""

from .mailer import EmailMessage, Mailer
from .notifications import NotificationDispatcher

__all__ = ["EmailMessage", "Mailer", "NotificationDispatcher"]
