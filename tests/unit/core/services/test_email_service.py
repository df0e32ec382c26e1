"""Tests for EmailService."""

import smtplib
from unittest.mock import MagicMock, patch

from django.test import SimpleTestCase, override_settings

from core.exceptions import InvalidArgumentError, TransportFailureError
from core.services.email_service import EmailService


class TestEmailService(SimpleTestCase):
    """Test suite for EmailService."""

    def setUp(self):
        """Set up test fixtures."""
        self.email_service = EmailService()

    @patch("core.services.email_service.smtplib.SMTP")
    def test_send_email_returns_message_id(self, mock_smtp_class):
        """Test successful sending returns the Message-ID header."""
        mock_smtp = MagicMock()
        mock_smtp_class.return_value.__enter__.return_value = mock_smtp

        result = self.email_service.send_email(
            to_email="kunde@example.com",
            subject="Bewertungserinnerung: Café Sonne",
            html_content="<p>Hallo</p>",
        )

        sent = mock_smtp.send_message.call_args[0][0]
        self.assertEqual(result, sent["Message-ID"])
        self.assertTrue(result.startswith("<"))
        self.assertTrue(result.endswith("@example.com>"))

    @patch("core.services.email_service.smtplib.SMTP")
    def test_each_message_gets_a_new_id(self, mock_smtp_class):
        """Test that two sends produce different delivery ids."""
        mock_smtp_class.return_value.__enter__.return_value = MagicMock()

        first = self.email_service.send_email("a@example.com", "S", "<p>x</p>")
        second = self.email_service.send_email("a@example.com", "S", "<p>x</p>")

        self.assertNotEqual(first, second)

    @patch("core.services.email_service.smtplib.SMTP")
    def test_send_email_with_custom_from(self, mock_smtp_class):
        """Test sending email with custom from address."""
        mock_smtp = MagicMock()
        mock_smtp_class.return_value.__enter__.return_value = mock_smtp

        self.email_service.send_email(
            to_email="kunde@example.com",
            subject="Test",
            html_content="<p>Test</p>",
            from_email="team@bewertung.de",
        )

        sent = mock_smtp.send_message.call_args[0][0]
        self.assertEqual(sent["From"], "team@bewertung.de")
        self.assertTrue(sent["Message-ID"].endswith("@bewertung.de>"))

    @patch("core.services.email_service.smtplib.SMTP")
    def test_message_has_plain_and_html_parts(self, mock_smtp_class):
        """Test the message carries a plain-text alternative."""
        mock_smtp = MagicMock()
        mock_smtp_class.return_value.__enter__.return_value = mock_smtp

        self.email_service.send_email(
            to_email="kunde@example.com",
            subject="Test",
            html_content="<p>Hallo<br>Welt</p>",
        )

        sent = mock_smtp.send_message.call_args[0][0]
        content_types = [part.get_content_type() for part in sent.get_payload()]
        self.assertEqual(content_types, ["text/plain", "text/html"])

    def test_send_email_invalid_email(self):
        """Test sending email with invalid email address."""
        with self.assertRaisesRegex(InvalidArgumentError, "Invalid email address"):
            self.email_service.send_email(
                to_email="invalid-email",
                subject="Test",
                html_content="<p>Test</p>",
            )

    def test_invalid_email_is_a_value_error(self):
        """Test that invalid addresses can be caught as ValueError."""
        with self.assertRaises(ValueError):
            self.email_service.send_email("", "Test", "<p>Test</p>")

    @patch("core.services.email_service.smtplib.SMTP")
    def test_smtp_exception_becomes_transport_failure(self, mock_smtp_class):
        """Test SMTP errors are wrapped with the recipient."""
        mock_smtp_class.return_value.__enter__.return_value.send_message.side_effect = (
            smtplib.SMTPRecipientsRefused({"kunde@example.com": (550, b"unknown")})
        )

        with self.assertRaises(TransportFailureError) as ctx:
            self.email_service.send_email(
                to_email="kunde@example.com",
                subject="Test",
                html_content="<p>Test</p>",
            )

        self.assertEqual(ctx.exception.recipient, "kunde@example.com")
        self.assertEqual(ctx.exception.status_code, 502)

    @patch("core.services.email_service.smtplib.SMTP")
    def test_connection_error_becomes_transport_failure(self, mock_smtp_class):
        """Test socket-level errors are wrapped as well."""
        mock_smtp_class.side_effect = ConnectionRefusedError("refused")

        with self.assertRaisesRegex(TransportFailureError, "refused"):
            self.email_service.send_email("kunde@example.com", "Test", "<p>Test</p>")

    @patch("core.services.email_service.smtplib.SMTP")
    def test_send_email_uses_tls(self, mock_smtp_class):
        """Test that email service uses TLS."""
        mock_smtp = MagicMock()
        mock_smtp_class.return_value.__enter__.return_value = mock_smtp

        self.email_service.send_email("kunde@example.com", "Test", "<p>Test</p>")

        mock_smtp.starttls.assert_called_once()

    @override_settings(EMAIL_USE_TLS=False, EMAIL_HOST_PASSWORD="")
    @patch("core.services.email_service.smtplib.SMTP")
    def test_no_tls_and_no_login_without_credentials(self, mock_smtp_class):
        """Test plain connections skip STARTTLS and login."""
        mock_smtp = MagicMock()
        mock_smtp_class.return_value.__enter__.return_value = mock_smtp

        EmailService().send_email("kunde@example.com", "Test", "<p>Test</p>")

        mock_smtp.starttls.assert_not_called()
        mock_smtp.login.assert_not_called()

    @override_settings(EMAIL_HOST_USER="bot@example.com", EMAIL_HOST_PASSWORD="geheim")
    @patch("core.services.email_service.smtplib.SMTP")
    def test_login_with_credentials(self, mock_smtp_class):
        """Test login happens when user and password are configured."""
        mock_smtp = MagicMock()
        mock_smtp_class.return_value.__enter__.return_value = mock_smtp

        EmailService().send_email("kunde@example.com", "Test", "<p>Test</p>")

        mock_smtp.login.assert_called_once_with("bot@example.com", "geheim")


class TestEmailValidation(SimpleTestCase):
    """Address pattern checks."""

    def test_valid_addresses(self):
        for address in ("a@b.de", "first.last+tag@sub.example.com"):
            with self.subTest(address=address):
                self.assertTrue(EmailService.is_valid_email(address))

    def test_invalid_addresses(self):
        for address in ("", "plain", "a@b", "a b@c.de", "@example.com"):
            with self.subTest(address=address):
                self.assertFalse(EmailService.is_valid_email(address))


class TestHtmlToPlain(SimpleTestCase):
    """Plain-text alternative generation."""

    def setUp(self):
        """Set up test fixtures."""
        self.email_service = EmailService()

    def test_strips_tags_and_style(self):
        html = "<html><head><style>p {color: red}</style></head><body><p>Hallo</p></body></html>"

        self.assertEqual(self.email_service._html_to_plain(html), "Hallo")

    def test_line_breaks_and_entities(self):
        html = "Danke&nbsp;sch&ouml;n<br/>Tom &amp; Jerry &lt;3"

        self.assertEqual(
            self.email_service._html_to_plain(html),
            "Danke sch&ouml;n\nTom & Jerry <3",
        )
