import pytest

from django_confreg.invoices.data import InvoiceData


@pytest.fixture
def invoice_dict():
    return {
        "invoiceNumber": "INV-001",
        "invoiceDate": "2025-10-01",
        "dueDate": "2025-10-31",
        "abn": "12 345 678 901",
        "companyName": "Example Conferences Pty Ltd",
        "companyAddress": "123 Business Street, Sydney NSW 2000",
        "companyPhone": "+61 2 1234 5678",
        "companyEmail": "info@example.com",
        "clientName": "Ada Lovelace",
        "clientAddress": "1 George St, Brisbane QLD 4000",
        "clientEmail": "ada@example.com",
        "items": [
            {"description": "Regular Registration", "quantity": 1, "unitPrice": 1318.18, "amount": 1318.18},
            {"description": "Conference Dinner", "quantity": "2", "unitPrice": "90.91", "amount": "181.82"},
        ],
        "subtotal": "1500.00",
        "gst": 150,
        "total": "1650",
        "paymentTerms": "Payment is due within 30 days of invoice date.",
        "bankDetails": {"accountName": "Example Conferences Pty Ltd", "bsb": "123-456", "accountNumber": "12345678"},
    }


@pytest.fixture
def invoice(invoice_dict):
    return InvoiceData.from_dict(invoice_dict)
