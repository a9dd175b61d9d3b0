"""Registration, payment log, and Stripe event models for django-confreg."""

from django.db import models


class RegistrationType(models.IntegerChoices):
    """Registration categories shared by every registration form.

    The label shown to a registrant is venue-specific and lives on the form
    definition; these labels are the ones used in exports.
    """

    PAPER_AUTHOR = 1, "Paper Author Registration"
    POSTER_AUTHOR = 2, "Poster Author Registration"
    STUDENT = 3, "Student Registration"
    REGULAR = 4, "Regular Registration"


class CustomerInfo(models.Model):
    """One person's conference registration.

    Created unpaid by the registration intake. The Stripe webhook is the only
    code path that moves ``status`` to ``PAID`` and fills in the billing
    address and ``attendee_name``; nothing moves it back.
    """

    class Status(models.IntegerChoices):
        """Payment status of a registration."""

        UNPAID = 0, "Unpaid"
        PAID = 1, "Paid"

    PAYMENT_FIELDS = frozenset(
        {"status", "attendee_name", "line1", "line2", "city", "state", "postal_code", "country"}
    )

    title = models.CharField(max_length=50, blank=True, null=True)
    other_title = models.CharField(max_length=100, blank=True, null=True)
    first_name = models.CharField(max_length=200)
    middle_name = models.CharField(max_length=200, blank=True, null=True)
    last_name = models.CharField(max_length=200)
    email = models.EmailField(max_length=254)
    phone = models.CharField(max_length=50, blank=True, null=True)
    affiliation = models.CharField(max_length=300, blank=True, null=True)
    position = models.CharField(max_length=200, blank=True, null=True)
    type = models.PositiveSmallIntegerField(help_text="Registration category; meaning depends on the form.")
    paper_number = models.CharField(max_length=300, blank=True, null=True)
    have_visa = models.PositiveSmallIntegerField(blank=True, null=True)
    dietary_requirements = models.TextField(blank=True, null=True)
    other_explain = models.TextField(blank=True, null=True)
    form_slug = models.SlugField(max_length=50, blank=True, default="")

    status = models.PositiveSmallIntegerField(choices=Status.choices, default=Status.UNPAID)
    attendee_name = models.CharField(max_length=400, blank=True, null=True)
    line1 = models.CharField(max_length=300, blank=True, null=True)
    line2 = models.CharField(max_length=300, blank=True, null=True)
    city = models.CharField(max_length=200, blank=True, null=True)
    state = models.CharField(max_length=200, blank=True, null=True)
    postal_code = models.CharField(max_length=50, blank=True, null=True)
    country = models.CharField(max_length=100, blank=True, null=True)

    create_date = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "customer_info"
        ordering = ["-id"]
        verbose_name = "registration"

    def __str__(self) -> str:
        return f"#{self.pk} {self.full_name} ({self.get_status_display()})"

    @property
    def full_name(self) -> str:
        """Return ``first [middle] last`` with the middle name only when present."""
        parts = [self.first_name, self.middle_name, self.last_name]
        return " ".join(part for part in parts if part)

    @property
    def is_paid(self) -> bool:
        """Whether the webhook has recorded a completed checkout."""
        return self.status == self.Status.PAID

    @property
    def address_display(self) -> str:
        """Return the captured billing address as one comma-separated line."""
        parts = [self.line1, self.line2, self.city, self.state, self.postal_code, self.country]
        return ", ".join(part for part in parts if part)


class PaymentLog(models.Model):
    """Append-only audit trail of raw payment payloads.

    ``customer_id`` is a plain integer rather than a foreign key: a log row is
    written before the registration is looked up and must survive even when
    the referenced registration does not exist.
    """

    class Type(models.IntegerChoices):
        """Kinds of payload recorded in the log."""

        CLIENT = 0, "Client report"
        CHECKOUT_COMPLETED = 1, "Checkout session completed"
        LINE_ITEMS = 4, "Checkout line items"

    content = models.TextField()
    type = models.PositiveSmallIntegerField(choices=Type.choices)
    customer_id = models.BigIntegerField(null=True, blank=True, db_index=True)
    create_time = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "payment_log"
        ordering = ["-create_time", "-id"]

    def __str__(self) -> str:
        return f"{self.get_type_display()} for customer {self.customer_id}"


class StripeEvent(models.Model):
    """A raw Stripe webhook event received by the webhook endpoint.

    The unique ``stripe_id`` doubles as the idempotency key: a redelivered
    event is acknowledged without running its handler a second time.
    """

    stripe_id = models.CharField(max_length=200, unique=True)
    kind = models.CharField(max_length=200)
    livemode = models.BooleanField(default=False)
    payload = models.JSONField(default=dict)
    processed = models.BooleanField(default=False)
    api_version = models.CharField(max_length=50, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.kind} ({self.stripe_id})"


class EventProcessingException(models.Model):
    """Captured traceback for a webhook event whose handler raised."""

    event = models.ForeignKey(
        StripeEvent,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="exceptions",
    )
    data = models.TextField(blank=True, default="")
    message = models.CharField(max_length=500)
    traceback = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"Exception for {self.event}: {self.message[:80]}"
