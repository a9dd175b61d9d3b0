"""Tests for invoice email delivery."""

import pytest
from django.core import mail
from django.test import override_settings

from django_confreg.invoices.mail import (
    SMTP_BACKEND,
    MailConfigurationError,
    check_mail_configuration,
    send_invoice_email,
)


@pytest.mark.unit
class TestCheckMailConfiguration:
    def test_non_smtp_backend_passes(self):
        check_mail_configuration()

    def test_smtp_backend_requires_credentials(self):
        with override_settings(EMAIL_BACKEND=SMTP_BACKEND, EMAIL_HOST="", EMAIL_HOST_USER="", EMAIL_HOST_PASSWORD=""):
            with pytest.raises(MailConfigurationError, match="EMAIL_HOST, EMAIL_HOST_USER, EMAIL_HOST_PASSWORD"):
                check_mail_configuration()

    def test_smtp_backend_missing_password_only(self):
        with override_settings(
            EMAIL_BACKEND=SMTP_BACKEND,
            EMAIL_HOST="smtp.example.com",
            EMAIL_HOST_USER="mailer",
            EMAIL_HOST_PASSWORD="",
        ):
            with pytest.raises(MailConfigurationError, match="set EMAIL_HOST_PASSWORD$"):
                check_mail_configuration()

    def test_smtp_backend_configured(self):
        with override_settings(
            EMAIL_BACKEND=SMTP_BACKEND,
            EMAIL_HOST="smtp.example.com",
            EMAIL_HOST_USER="mailer",
            EMAIL_HOST_PASSWORD="secret",
        ):
            check_mail_configuration()


@pytest.mark.unit
class TestSendInvoiceEmail:
    def test_sends_html_with_pdf_attachment(self, invoice):
        message_id = send_invoice_email(invoice, "ada@example.com")

        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.to == ["ada@example.com"]
        assert message.subject == "Invoice INV-001 from Example Conferences Pty Ltd"
        assert message.body == "Please find attached invoice INV-001 for 1650.00 AUD."
        assert message.from_email == "Example Conferences Pty Ltd <registration@example.com>"
        assert message.extra_headers["Message-ID"] == message_id
        assert message_id.endswith("@example.com>")

        html, mimetype = message.alternatives[0]
        assert mimetype == "text/html"
        assert "Tax Invoice" in html

        filename, content, attachment_type = message.attachments[0]
        assert filename == "Invoice-INV-001.pdf"
        assert content.startswith(b"%PDF")
        assert attachment_type == "application/pdf"

    def test_configured_from_email(self, invoice):
        with override_settings(DJANGO_CONFREG={"invoice": {"from_email": "billing@conf.example"}}):
            send_invoice_email(invoice, "ada@example.com")

        assert mail.outbox[0].from_email == "Example Conferences Pty Ltd <billing@conf.example>"

    def test_misconfigured_smtp_sends_nothing(self, invoice):
        with override_settings(EMAIL_BACKEND=SMTP_BACKEND, EMAIL_HOST="", EMAIL_HOST_USER="", EMAIL_HOST_PASSWORD=""):
            with pytest.raises(MailConfigurationError):
                send_invoice_email(invoice, "ada@example.com")
        assert mail.outbox == []
