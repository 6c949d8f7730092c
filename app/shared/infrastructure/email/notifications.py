"""
Notification dispatcher for registration and discussion events.
"""

import logging
from typing import Protocol

from .mailer import EmailMessage

logger = logging.getLogger(__name__)


class EmailSender(Protocol):
    async def send(self, message: EmailMessage) -> None: ...


class NotificationDispatcher:
    """Builds the transactional emails the platform sends."""
    
    def __init__(self, sender: EmailSender):
        self._sender = sender
    
    async def send_activation_email(self, email: str, name: str, activation_code: str) -> None:
        await self._sender.send(EmailMessage(
            recipient=email,
            subject="Activate your account",
            template_name="activation-mail",
            template_data={"user": {"name": name}, "activation_code": activation_code},
        ))
    
    async def send_question_reply_email(self, email: str, name: str, title: str) -> None:
        """Tell a question's author that someone replied."""
        await self._sender.send(EmailMessage(
            recipient=email,
            subject="Question Reply",
            template_name="question-reply",
            template_data={"name": name, "title": title},
        ))
