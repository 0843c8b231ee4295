"""
Email Service

Sends operator notifications. Templates live in ``templates/emails``.
"""

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError, select_autoescape

from dualpascal.config import settings
from dualpascal.models.contact import Contact

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates" / "emails"


class EmailService:
    """Service for sending emails with template support"""

    def __init__(self, template_dir: Path = TEMPLATE_DIR):
        """Initialize email service with Jinja2 template engine"""
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
        )

        self.smtp_host = settings.smtp_host
        self.smtp_port = settings.smtp_port
        self.smtp_user = settings.smtp_user
        self.smtp_password = settings.smtp_password
        self.smtp_from = settings.smtp_from

    def _send_email(
        self,
        to_email: str | list[str],
        subject: str,
        html_body: str,
        text_body: str | None = None,
    ) -> bool:
        """
        Send an email using SMTP.

        Args:
            to_email: Recipient email address(es)
            subject: Email subject
            html_body: HTML email body
            text_body: Plain text email body (optional)

        Returns:
            bool: True if email sent successfully, False otherwise
        """
        try:
            msg = MIMEMultipart("alternative")
            msg["Subject"] = subject
            msg["From"] = self.smtp_from
            msg["To"] = to_email if isinstance(to_email, str) else ", ".join(to_email)

            if text_body:
                msg.attach(MIMEText(text_body, "plain", "utf-8"))
            msg.attach(MIMEText(html_body, "html", "utf-8"))

            with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=10) as server:
                server.starttls()
                if self.smtp_user and self.smtp_password:
                    server.login(self.smtp_user, self.smtp_password)
                server.send_message(msg)

            return True

        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to send email to {to_email}: {e}")
            return False

    def render_new_contact(self, contact: Contact) -> tuple[str, str, str]:
        """Return ``(subject, html_body, text_body)`` for a contact notification."""
        context = {"contact": contact, "app_name": settings.app_name}
        subject = f"[問い合わせ] {contact.subject}"
        html_body = self.env.get_template("new_contact.html").render(**context)
        text_body = self.env.get_template("new_contact.txt").render(**context)
        return subject, html_body, text_body

    def send_new_contact_notification(self, contact: Contact) -> bool:
        """
        Notify the operator address about a new contact submission.

        Returns:
            bool: True if email sent successfully
        """
        try:
            subject, html_body, text_body = self.render_new_contact(contact)
        except TemplateError as e:
            logger.error(f"Failed to render contact notification {contact.id}: {e}")
            return False

        return self._send_email(
            to_email=settings.contact_notification_email,
            subject=subject,
            html_body=html_body,
            text_body=text_body,
        )


email_service = EmailService()
