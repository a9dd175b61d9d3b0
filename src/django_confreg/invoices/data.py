"""The flat invoice data shape shared by every invoice renderer.

Front-ends exchange invoices as camelCase JSON; :meth:`InvoiceData.from_dict`
validates that shape and :meth:`InvoiceData.to_dict` produces it.
"""

import datetime
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from django.utils import timezone

from django_confreg.settings import get_config


def _decimal(value: object, label: str) -> Decimal:
    if isinstance(value, bool) or value is None or value == "":
        msg = f"{label} must be a number"
        raise ValueError(msg)
    try:
        number = Decimal(str(value))
    except InvalidOperation as exc:
        msg = f"{label} must be a number"
        raise ValueError(msg) from exc
    if not number.is_finite():
        msg = f"{label} must be a finite number"
        raise ValueError(msg)
    return number


def _text(data: dict, key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


@dataclass(frozen=True, slots=True)
class InvoiceItem:
    """One invoice line."""

    description: str
    quantity: Decimal
    unit_price: Decimal
    amount: Decimal


@dataclass(frozen=True, slots=True)
class BankDetails:
    """Where to pay the invoice."""

    account_name: str = ""
    bsb: str = ""
    account_number: str = ""


@dataclass(frozen=True, slots=True)
class InvoiceData:
    """Everything an invoice shows, in display order.

    Items keep the order they were given in; renderers never re-sort them.
    """

    invoice_number: str
    invoice_date: str
    due_date: str
    abn: str
    company_name: str
    company_address: str
    company_phone: str
    company_email: str
    client_name: str
    client_address: str
    client_email: str
    items: tuple[InvoiceItem, ...]
    subtotal: Decimal
    gst: Decimal
    total: Decimal
    payment_terms: str = ""
    bank_details: BankDetails = field(default_factory=BankDetails)

    @classmethod
    def from_dict(cls, data: object) -> "InvoiceData":
        """Build an invoice from its camelCase JSON representation.

        Args:
            data: Decoded JSON object.

        Returns:
            The parsed invoice.

        Raises:
            ValueError: If *data* is not an object, ``invoiceNumber`` is
                missing, ``items`` is not a list, or a money field is not
                numeric.
        """
        if not isinstance(data, dict):
            msg = "invoiceData must be an object"
            raise ValueError(msg)
        if not _text(data, "invoiceNumber"):
            msg = "invoiceData.invoiceNumber is required"
            raise ValueError(msg)

        raw_items = data.get("items", [])
        if not isinstance(raw_items, list):
            msg = "invoiceData.items must be a list"
            raise ValueError(msg)
        items = []
        for index, raw in enumerate(raw_items):
            if not isinstance(raw, dict):
                msg = f"invoiceData.items[{index}] must be an object"
                raise ValueError(msg)
            items.append(
                InvoiceItem(
                    description=_text(raw, "description"),
                    quantity=_decimal(raw.get("quantity"), f"items[{index}].quantity"),
                    unit_price=_decimal(raw.get("unitPrice"), f"items[{index}].unitPrice"),
                    amount=_decimal(raw.get("amount"), f"items[{index}].amount"),
                )
            )

        bank = data.get("bankDetails") or {}
        if not isinstance(bank, dict):
            msg = "invoiceData.bankDetails must be an object"
            raise ValueError(msg)

        return cls(
            invoice_number=_text(data, "invoiceNumber"),
            invoice_date=_text(data, "invoiceDate"),
            due_date=_text(data, "dueDate"),
            abn=_text(data, "abn"),
            company_name=_text(data, "companyName"),
            company_address=_text(data, "companyAddress"),
            company_phone=_text(data, "companyPhone"),
            company_email=_text(data, "companyEmail"),
            client_name=_text(data, "clientName"),
            client_address=_text(data, "clientAddress"),
            client_email=_text(data, "clientEmail"),
            items=tuple(items),
            subtotal=_decimal(data.get("subtotal"), "subtotal"),
            gst=_decimal(data.get("gst"), "gst"),
            total=_decimal(data.get("total"), "total"),
            payment_terms=_text(data, "paymentTerms"),
            bank_details=BankDetails(
                account_name=_text(bank, "accountName"),
                bsb=_text(bank, "bsb"),
                account_number=_text(bank, "accountNumber"),
            ),
        )

    def to_dict(self) -> dict:
        """Return the camelCase JSON representation, money as 2-decimal strings."""
        return {
            "invoiceNumber": self.invoice_number,
            "invoiceDate": self.invoice_date,
            "dueDate": self.due_date,
            "abn": self.abn,
            "companyName": self.company_name,
            "companyAddress": self.company_address,
            "companyPhone": self.company_phone,
            "companyEmail": self.company_email,
            "clientName": self.client_name,
            "clientAddress": self.client_address,
            "clientEmail": self.client_email,
            "items": [
                {
                    "description": item.description,
                    "quantity": str(item.quantity),
                    "unitPrice": f"{item.unit_price:.2f}",
                    "amount": f"{item.amount:.2f}",
                }
                for item in self.items
            ],
            "subtotal": f"{self.subtotal:.2f}",
            "gst": f"{self.gst:.2f}",
            "total": f"{self.total:.2f}",
            "paymentTerms": self.payment_terms,
            "bankDetails": {
                "accountName": self.bank_details.account_name,
                "bsb": self.bank_details.bsb,
                "accountNumber": self.bank_details.account_number,
            },
        }


def sample_invoice_data(today: datetime.date | None = None) -> InvoiceData:
    """Return a preview invoice filled with the configured issuer details."""
    config = get_config().invoice
    today = today or timezone.localdate()
    items = (
        InvoiceItem("Regular Registration", Decimal(1), Decimal("1318.18"), Decimal("1318.18")),
        InvoiceItem("Conference Dinner", Decimal(2), Decimal("90.91"), Decimal("181.82")),
    )
    subtotal = sum((item.amount for item in items), Decimal(0))
    gst = (subtotal * config.tax_rate).quantize(Decimal("0.01"))
    return InvoiceData(
        invoice_number="INV-PREVIEW-001",
        invoice_date=today.isoformat(),
        due_date=(today + datetime.timedelta(days=config.due_days)).isoformat(),
        abn=config.abn,
        company_name=config.company_name,
        company_address=config.company_address,
        company_phone=config.company_phone,
        company_email=config.company_email,
        client_name="Client Name",
        client_address="456 Client Avenue, Melbourne VIC 3000, Australia",
        client_email="accounts@example.com",
        items=items,
        subtotal=subtotal,
        gst=gst,
        total=subtotal + gst,
        payment_terms=config.payment_terms,
        bank_details=BankDetails(
            account_name=config.bank_account_name,
            bsb=config.bank_bsb,
            account_number=config.bank_account_number,
        ),
    )
