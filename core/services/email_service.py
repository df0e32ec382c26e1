"""Email transport for sending review reminders via SMTP."""

import re
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import make_msgid, parseaddr

from django.conf import settings

import structlog

from core.exceptions import InvalidArgumentError, TransportFailureError

logger = structlog.get_logger(__name__)

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class EmailService:
    """Send HTML emails over SMTP.

    Each message carries a plain-text alternative derived from the HTML body
    and a generated Message-ID, which is returned as the delivery id.
    """

    def __init__(self) -> None:
        """Initialize email service with SMTP configuration."""
        self.smtp_host = settings.EMAIL_HOST
        self.smtp_port = settings.EMAIL_PORT
        self.smtp_user = settings.EMAIL_HOST_USER
        self.smtp_password = settings.EMAIL_HOST_PASSWORD
        self.use_tls = settings.EMAIL_USE_TLS
        self.from_email = settings.DEFAULT_FROM_EMAIL

    def send_email(
        self,
        to_email: str,
        subject: str,
        html_content: str,
        from_email: str | None = None,
    ) -> str:
        """Send an email via SMTP.

        Args:
            to_email: Recipient email address
            subject: Email subject line
            html_content: HTML email content
            from_email: Sender email (defaults to DEFAULT_FROM_EMAIL)

        Returns:
            The Message-ID of the accepted message

        Raises:
            InvalidArgumentError: If the recipient address is invalid
            TransportFailureError: If the SMTP exchange fails
        """
        if not self.is_valid_email(to_email):
            raise InvalidArgumentError(f"Invalid email address: {to_email}")

        sender = from_email or self.from_email
        domain = parseaddr(sender)[1].rpartition("@")[2] or None
        message_id = make_msgid(domain=domain)

        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = sender
        msg["To"] = to_email
        msg["Message-ID"] = message_id

        msg.attach(MIMEText(self._html_to_plain(html_content), "plain", "utf-8"))
        msg.attach(MIMEText(html_content, "html", "utf-8"))

        try:
            with smtplib.SMTP(self.smtp_host, self.smtp_port) as server:
                if self.use_tls:
                    server.starttls()

                if self.smtp_user and self.smtp_password:
                    server.login(self.smtp_user, self.smtp_password)

                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(
                "email_send_failed",
                to_email=to_email,
                subject=subject,
                error=str(e),
            )
            raise TransportFailureError(str(e), recipient=to_email) from e

        logger.info(
            "email_sent",
            to_email=to_email,
            subject=subject,
            delivery_id=message_id,
        )
        return message_id

    @staticmethod
    def is_valid_email(email: str) -> bool:
        """Check an address against a simple local@domain.tld pattern."""
        return bool(email) and bool(_EMAIL_PATTERN.match(email))

    def _html_to_plain(self, html: str) -> str:
        """Convert HTML to plain text.

        Args:
            html: HTML content

        Returns:
            Plain text version of the HTML
        """
        text = re.sub(r"<(style|head)[^>]*>.*?</\1>", "", html, flags=re.S | re.I)
        text = re.sub(r"<br\s*/?>", "\n", text, flags=re.I)
        text = re.sub(r"<[^>]+>", "", text)

        for entity, char in (
            ("&nbsp;", " "),
            ("&lt;", "<"),
            ("&gt;", ">"),
            ("&quot;", '"'),
            ("&#x27;", "'"),
            ("&#39;", "'"),
            ("&amp;", "&"),
        ):
            text = text.replace(entity, char)

        text = re.sub(r"[ \t]+\n", "\n", text)
        text = re.sub(r"\n\s*\n", "\n\n", text)
        return text.strip()


email_service = EmailService()
