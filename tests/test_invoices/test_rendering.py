"""Tests for the invoice renderers."""

import dataclasses
import re
from decimal import Decimal
from io import BytesIO

import pytest
from django.template import Context, Template
from django.test import override_settings
from pypdf import PdfReader

from django_confreg.invoices.data import InvoiceData, InvoiceItem
from django_confreg.invoices.rendering import format_money, render_invoice_html, render_invoice_pdf, tax_heading


@pytest.mark.unit
class TestFormatMoney:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [(Decimal(6000), "6000.00"), (Decimal("90.905"), "90.91"), (Decimal("0.1"), "0.10")],
    )
    def test_two_decimals_without_grouping(self, amount, expected):
        assert format_money(amount) == expected


@pytest.mark.unit
class TestTaxHeading:
    def test_default(self):
        assert tax_heading() == "GST (10%)"

    def test_configured_rate_and_label(self):
        with override_settings(DJANGO_CONFREG={"invoice": {"tax_rate": "0.125", "tax_label": "VAT"}}):
            assert tax_heading() == "VAT (12.5%)"


@pytest.mark.unit
class TestRenderInvoiceHtml:
    def test_contains_every_field(self, invoice):
        html = render_invoice_html(invoice)

        for text in (
            "Tax Invoice",
            "INV-001",
            "2025-10-31",
            "ABN: 12 345 678 901",
            "Ada Lovelace",
            "Conference Dinner",
            "$1318.18",
            "$90.91",
            "$181.82",
            "GST (10%):",
            "$1650.00",
            "Total (AUD):",
            "BSB: 123-456",
        ):
            assert text in html

    def test_items_in_given_order(self, invoice):
        html = render_invoice_html(invoice)
        assert html.index("Regular Registration") < html.index("Conference Dinner")

    def test_escapes_client_input(self, invoice_dict):
        invoice_dict["clientName"] = "<script>alert(1)</script>"
        html = render_invoice_html(InvoiceData.from_dict(invoice_dict))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html


@pytest.mark.unit
class TestRenderInvoicePdf:
    def test_returns_pdf_bytes(self, invoice):
        pdf = render_invoice_pdf(invoice)
        assert pdf.startswith(b"%PDF")
        assert pdf.rstrip().endswith(b"%%EOF")

    def test_many_items_span_pages(self, invoice):
        items = tuple(
            InvoiceItem(f"Workshop session {n} with a fairly long description", Decimal(1), Decimal(10), Decimal(10))
            for n in range(80)
        )
        long_invoice = dataclasses.replace(invoice, items=items)

        pdf = render_invoice_pdf(long_invoice)

        assert pdf.startswith(b"%PDF")
        page_count = max(int(count) for count in re.findall(rb"/Count (\d+)", pdf))
        assert page_count >= 2

    def test_amounts_and_item_order_match_html(self, invoice):
        text = _pdf_text(render_invoice_pdf(invoice))
        html = render_invoice_html(invoice)

        amounts = [invoice.subtotal, invoice.gst, invoice.total]
        for item in invoice.items:
            amounts.extend([item.unit_price, item.amount])
        for amount in amounts:
            assert f"${format_money(amount)}" in text
            assert f"${format_money(amount)}" in html

        assert text.index("Regular Registration") < text.index("Conference Dinner")
        assert text.index("$1318.18") < text.index("$181.82") < text.index("$1500.00")
        assert html.index("$1318.18") < html.index("$181.82") < html.index("$1500.00")

    def test_totals_are_two_decimal(self, invoice):
        text = _pdf_text(render_invoice_pdf(invoice))

        assert "$150.00" in text
        assert "$1650.00" in text
        assert "Total (AUD):" in text


def _pdf_text(pdf: bytes) -> str:
    return "\n".join(page.extract_text() for page in PdfReader(BytesIO(pdf)).pages)


@pytest.mark.unit
class TestInvoiceTags:
    def test_money_and_quantity_filters(self):
        template = Template("{% load invoice_tags %}{{ amount|money }} x{{ qty|quantity }}")
        rendered = template.render(Context({"amount": Decimal("5"), "qty": Decimal("2.000")}))
        assert rendered == "5.00 x2"
