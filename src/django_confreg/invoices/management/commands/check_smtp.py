"""Management command to verify the outgoing mail connection."""

import smtplib

from django.conf import settings
from django.core.mail import get_connection
from django.core.management.base import BaseCommand, CommandError

from django_confreg.invoices.mail import MailConfigurationError, check_mail_configuration


class Command(BaseCommand):
    """Open and close a connection with the configured email backend.

    Usage::

        manage.py check_smtp
    """

    help = "Check that the configured SMTP relay accepts a connection."

    def handle(self, *args: object, **options: object) -> None:
        """Verify configuration, then open and close one connection.

        Raises:
            CommandError: If settings are missing or the relay rejects the connection.
        """
        try:
            check_mail_configuration()
        except MailConfigurationError as exc:
            raise CommandError(str(exc)) from exc

        connection = get_connection(fail_silently=False)
        try:
            connection.open()
        except (OSError, smtplib.SMTPException) as exc:
            msg = (
                f"SMTP connection to {settings.EMAIL_HOST}:{settings.EMAIL_PORT} failed: {exc}. "
                "Check the host, port, credentials, TLS settings, and firewall."
            )
            raise CommandError(msg) from exc
        finally:
            connection.close()

        self.stdout.write(self.style.SUCCESS(f"SMTP connection OK: {settings.EMAIL_HOST}:{settings.EMAIL_PORT}"))
        if settings.EMAIL_HOST_USER:
            self.stdout.write(f"  User: {settings.EMAIL_HOST_USER}")
