# 📄 File: app/shared/infrastructure/email/mailer.py
#
# 🧭 Purpose (Layman Explanation):
# Writes and sends the emails our app needs, like the account activation code and
# the "someone answered your question" message.
#
# 🧪 Purpose (Technical Summary):
# Jinja2 HTML template rendering plus SendGrid delivery. The SendGrid client is
# blocking, so delivery runs in a worker thread. Failures are surfaced as
# EmailDeliveryError and never retried.
#
# 🔗 Dependencies:
# - jinja2 (template rendering)
# - sendgrid (SendGridAPIClient, Mail)
# - app.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# - app.shared.infrastructure.email.notifications
# - app/main.py (lifespan creates the mailer)

import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape
from pydantic import BaseModel, Field
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import EmailDeliveryError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parents[3] / "templates" / "mails"


class EmailMessage(BaseModel):
    """Outbound templated email."""
    recipient: str
    subject: str
    template_name: str
    template_data: Dict[str, Any] = Field(default_factory=dict)


class Mailer:
    """
    Renders mail templates and delivers them through SendGrid.
    """
    
    def __init__(
        self,
        settings: Optional[Settings] = None,
        templates_dir: Path = TEMPLATES_DIR,
    ):
        self.settings = settings or get_settings()
        self._env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html"]),
        )
        self._client: Optional[SendGridAPIClient] = None
        if self.settings.SENDGRID_API_KEY:
            self._client = SendGridAPIClient(self.settings.SENDGRID_API_KEY)
    
    def render(self, template_name: str, data: Dict[str, Any]) -> str:
        """
        Render an HTML mail template.
        
        Args:
            template_name: Template file name without extension
            data: Template context
            
        Returns:
            str: Rendered HTML
        """
        try:
            template = self._env.get_template(f"{template_name}.html")
            return template.render(**data)
        except TemplateError as e:
            raise EmailDeliveryError(f"Could not render email template '{template_name}': {e}")
    
    async def send(self, message: EmailMessage) -> None:
        """
        Render and send an email.
        
        Raises:
            EmailDeliveryError: If rendering or delivery fails
        """
        html = self.render(message.template_name, message.template_data)
        
        if self._client is None:
            raise EmailDeliveryError("Email delivery is not configured")
        
        mail = Mail(
            from_email=(self.settings.MAIL_FROM_EMAIL, self.settings.MAIL_FROM_NAME),
            to_emails=message.recipient,
            subject=message.subject,
            html_content=html,
        )
        
        try:
            response = await asyncio.to_thread(self._client.send, mail)
        except Exception as e:
            logger.error(f"Email delivery to {message.recipient} failed: {e}")
            raise EmailDeliveryError(f"Email delivery failed: {e}")
        
        if response.status_code >= 400:
            raise EmailDeliveryError(f"Email delivery failed with status {response.status_code}")
        
        logger.info(f"Email '{message.template_name}' sent to {message.recipient}")
