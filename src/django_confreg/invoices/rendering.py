"""Invoice renderers.

Three renderers consume the same :class:`InvoiceData`: the staff preview
page (a template including the email fragment), :func:`render_invoice_html`
for email bodies, and :func:`render_invoice_pdf` for downloads. All of them
format money through :func:`format_money` and keep item order.
"""

from decimal import ROUND_HALF_UP, Decimal
from io import BytesIO

from django.template.loader import render_to_string
from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from django_confreg.invoices.data import InvoiceData
from django_confreg.settings import get_config

CENTS = Decimal("0.01")

BLUE = HexColor("#2563EB")
TEXT = HexColor("#333333")
MUTED = HexColor("#666666")
RULE = HexColor("#E5E7EB")
HEADER_FILL = HexColor("#F8FAFC")

W, H = A4
MARGIN = 50
CONTENT_W = W - 2 * MARGIN

# Right edges of the numeric columns and the centre of the quantity column.
AMOUNT_X = W - MARGIN - 8
UNIT_PRICE_X = AMOUNT_X - 95
QTY_X = UNIT_PRICE_X - 110
DESCRIPTION_W = QTY_X - MARGIN - 40


def format_money(amount: Decimal) -> str:
    """Return *amount* with exactly two decimals, e.g. ``"6000.00"``."""
    return f"{amount.quantize(CENTS, rounding=ROUND_HALF_UP):.2f}"


def tax_heading() -> str:
    """Return the tax row label, e.g. ``"GST (10%)"``."""
    invoice = get_config().invoice
    percent = (invoice.tax_rate * 100).normalize()
    return f"{invoice.tax_label} ({percent:f}%)"


def invoice_context(data: InvoiceData) -> dict[str, object]:
    """Template context shared by the preview page and the email fragment."""
    config = get_config()
    return {
        "invoice": data,
        "currency": config.currency,
        "currency_symbol": config.currency_symbol,
        "tax_heading": tax_heading(),
    }


def render_invoice_html(data: InvoiceData) -> str:
    """Render the inline-styled HTML fragment used as an email body."""
    return render_to_string("django_confreg/invoices/invoice_email.html", invoice_context(data))


class _PdfWriter:
    """Cursor-based drawing on an A4 canvas with automatic page breaks."""

    def __init__(self, buffer: BytesIO, title: str) -> None:
        self.c = canvas.Canvas(buffer, pagesize=A4)
        self.c.setTitle(title)
        self.y = H - MARGIN

    def text(self, value: str, x: float, size: float = 10, bold: bool = False, color: object = TEXT) -> None:
        self.c.setFont("Helvetica-Bold" if bold else "Helvetica", size)
        self.c.setFillColor(color)
        self.c.drawString(x, self.y, value)

    def right(self, value: str, x: float, size: float = 10, bold: bool = False) -> None:
        self.c.setFont("Helvetica-Bold" if bold else "Helvetica", size)
        self.c.setFillColor(TEXT)
        self.c.drawRightString(x, self.y, value)

    def centre(self, value: str, x: float, size: float = 10) -> None:
        self.c.setFont("Helvetica", size)
        self.c.setFillColor(TEXT)
        self.c.drawCentredString(x, self.y, value)

    def rule(self, color: object = RULE, width: float = 1) -> None:
        self.c.setStrokeColor(color)
        self.c.setLineWidth(width)
        self.c.line(MARGIN, self.y, W - MARGIN, self.y)

    def down(self, amount: float) -> None:
        self.y -= amount

    def ensure_space(self, needed: float) -> bool:
        """Start a new page when fewer than *needed* points remain."""
        if self.y - needed >= MARGIN:
            return False
        self.c.showPage()
        self.y = H - MARGIN
        return True


def _draw_header(pdf: _PdfWriter, data: InvoiceData) -> None:
    top = pdf.y
    pdf.text(data.company_name, MARGIN, size=18, bold=True, color=BLUE)
    pdf.down(20)
    for line in (data.company_address, f"Phone: {data.company_phone}", f"Email: {data.company_email}"):
        pdf.text(line, MARGIN, size=9, color=MUTED)
        pdf.down(13)
    pdf.text(f"ABN: {data.abn}", MARGIN, size=9, bold=True)
    bottom = pdf.y

    pdf.y = top
    pdf.right("Tax Invoice", W - MARGIN, size=16, bold=True)
    pdf.down(24)
    for label, value in (("Invoice #", data.invoice_number), ("Date", data.invoice_date), ("Due Date", data.due_date)):
        pdf.right(f"{label}: {value}", W - MARGIN)
        pdf.down(14)

    pdf.y = min(bottom, pdf.y) - 12
    pdf.rule(BLUE, 2)
    pdf.down(28)


def _draw_bill_to(pdf: _PdfWriter, data: InvoiceData) -> None:
    pdf.text("Bill To:", MARGIN, size=13, bold=True, color=BLUE)
    pdf.down(18)
    pdf.text(data.client_name, MARGIN, bold=True)
    pdf.down(14)
    for line in (data.client_address, data.client_email):
        pdf.text(line, MARGIN)
        pdf.down(14)
    pdf.down(14)


def _draw_table_header(pdf: _PdfWriter) -> None:
    pdf.c.setFillColor(HEADER_FILL)
    pdf.c.rect(MARGIN, pdf.y - 7, CONTENT_W, 22, stroke=0, fill=1)
    pdf.text("Description", MARGIN + 8, bold=True)
    pdf.c.setFont("Helvetica-Bold", 10)
    pdf.c.drawCentredString(QTY_X, pdf.y, "Qty")
    pdf.right("Unit Price", UNIT_PRICE_X, bold=True)
    pdf.right("Amount", AMOUNT_X, bold=True)
    pdf.down(22)


def _draw_items(pdf: _PdfWriter, data: InvoiceData, symbol: str) -> None:
    _draw_table_header(pdf)
    for item in data.items:
        lines = simpleSplit(item.description, "Helvetica", 10, DESCRIPTION_W) or [""]
        if pdf.ensure_space(14 * len(lines) + 10):
            _draw_table_header(pdf)
        pdf.centre(f"{item.quantity.normalize():f}", QTY_X)
        pdf.right(f"{symbol}{format_money(item.unit_price)}", UNIT_PRICE_X)
        pdf.right(f"{symbol}{format_money(item.amount)}", AMOUNT_X)
        for line in lines:
            pdf.text(line, MARGIN + 8)
            pdf.down(14)
        pdf.down(2)
        pdf.rule()
        pdf.down(14)


def _draw_totals(pdf: _PdfWriter, data: InvoiceData, symbol: str, currency: str) -> None:
    pdf.ensure_space(90)
    label_x = AMOUNT_X - 200
    for label, value in (("Subtotal:", data.subtotal), (f"{tax_heading()}:", data.gst)):
        pdf.text(label, label_x)
        pdf.right(f"{symbol}{format_money(value)}", AMOUNT_X)
        pdf.down(18)
    pdf.c.setStrokeColor(RULE)
    pdf.c.setLineWidth(2)
    pdf.c.line(label_x, pdf.y + 10, AMOUNT_X, pdf.y + 10)
    pdf.down(6)
    pdf.text(f"Total ({currency}):", label_x, size=13, bold=True)
    pdf.right(f"{symbol}{format_money(data.total)}", AMOUNT_X, size=13, bold=True)
    pdf.down(34)


def _draw_payment_details(pdf: _PdfWriter, data: InvoiceData) -> None:
    terms = simpleSplit(f"Payment Terms: {data.payment_terms}", "Helvetica", 10, CONTENT_W)
    pdf.ensure_space(14 * len(terms) + 80)
    for line in terms:
        pdf.text(line, MARGIN)
        pdf.down(14)
    pdf.down(10)
    pdf.text("Bank Details:", MARGIN, bold=True)
    pdf.down(14)
    bank = data.bank_details
    for line in (f"Account Name: {bank.account_name}", f"BSB: {bank.bsb}", f"Account Number: {bank.account_number}"):
        pdf.text(line, MARGIN)
        pdf.down(14)


def render_invoice_pdf(data: InvoiceData) -> bytes:
    """Render *data* as a single- or multi-page A4 PDF and return its bytes."""
    config = get_config()
    buffer = BytesIO()
    pdf = _PdfWriter(buffer, f"Invoice {data.invoice_number}")
    _draw_header(pdf, data)
    _draw_bill_to(pdf, data)
    _draw_items(pdf, data, config.currency_symbol)
    _draw_totals(pdf, data, config.currency_symbol, config.currency)
    _draw_payment_details(pdf, data)
    pdf.c.save()
    return buffer.getvalue()
