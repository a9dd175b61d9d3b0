"""Send invoices through Django's configured email backend."""

import logging
from email.utils import formataddr, make_msgid

from django.conf import settings
from django.core.mail import EmailMultiAlternatives

from django_confreg.invoices.data import InvoiceData
from django_confreg.invoices.rendering import format_money, render_invoice_html, render_invoice_pdf
from django_confreg.settings import get_config

logger = logging.getLogger(__name__)

SMTP_BACKEND = "django.core.mail.backends.smtp.EmailBackend"


class MailConfigurationError(Exception):
    """Raised when the SMTP relay is selected but not configured."""


def check_mail_configuration() -> None:
    """Ensure the SMTP backend has a host and credentials.

    Other backends (console, locmem, file) need no credentials and pass.

    Raises:
        MailConfigurationError: Naming the missing ``EMAIL_*`` settings.
    """
    if settings.EMAIL_BACKEND != SMTP_BACKEND:
        return
    missing = [
        name
        for name in ("EMAIL_HOST", "EMAIL_HOST_USER", "EMAIL_HOST_PASSWORD")
        if not getattr(settings, name, "")
    ]
    if missing:
        msg = f"SMTP configuration incomplete: set {', '.join(missing)}"
        raise MailConfigurationError(msg)


def send_invoice_email(data: InvoiceData, recipient: str) -> str:
    """Email *data* to *recipient* with the PDF attached.

    Args:
        data: The invoice to send.
        recipient: Destination address.

    Returns:
        The ``Message-ID`` header of the sent message.

    Raises:
        MailConfigurationError: If SMTP is selected but not configured.
        OSError: Or an ``smtplib`` error, if delivery fails.
    """
    check_mail_configuration()
    config = get_config()

    address = config.invoice.from_email or settings.DEFAULT_FROM_EMAIL
    from_email = formataddr((data.company_name, address)) if data.company_name else address
    message_id = make_msgid(domain=address.rpartition("@")[2] or None)

    message = EmailMultiAlternatives(
        subject=f"Invoice {data.invoice_number} from {data.company_name}",
        body=f"Please find attached invoice {data.invoice_number} for {format_money(data.total)} {config.currency}.",
        from_email=from_email,
        to=[recipient],
        headers={"Message-ID": message_id},
    )
    message.attach_alternative(render_invoice_html(data), "text/html")
    message.attach(f"Invoice-{data.invoice_number}.pdf", render_invoice_pdf(data), "application/pdf")
    message.send(fail_silently=False)

    logger.info("Invoice %s emailed (message %s)", data.invoice_number, message_id)
    return message_id
