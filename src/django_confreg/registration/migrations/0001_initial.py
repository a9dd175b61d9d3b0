import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CustomerInfo",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(blank=True, max_length=50, null=True)),
                ("other_title", models.CharField(blank=True, max_length=100, null=True)),
                ("first_name", models.CharField(max_length=200)),
                ("middle_name", models.CharField(blank=True, max_length=200, null=True)),
                ("last_name", models.CharField(max_length=200)),
                ("email", models.EmailField(max_length=254)),
                ("phone", models.CharField(blank=True, max_length=50, null=True)),
                ("affiliation", models.CharField(blank=True, max_length=300, null=True)),
                ("position", models.CharField(blank=True, max_length=200, null=True)),
                (
                    "type",
                    models.PositiveSmallIntegerField(
                        help_text="Registration category; meaning depends on the form."
                    ),
                ),
                ("paper_number", models.CharField(blank=True, max_length=300, null=True)),
                ("have_visa", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("dietary_requirements", models.TextField(blank=True, null=True)),
                ("other_explain", models.TextField(blank=True, null=True)),
                ("form_slug", models.SlugField(blank=True, default="")),
                (
                    "status",
                    models.PositiveSmallIntegerField(choices=[(0, "Unpaid"), (1, "Paid")], default=0),
                ),
                ("attendee_name", models.CharField(blank=True, max_length=400, null=True)),
                ("line1", models.CharField(blank=True, max_length=300, null=True)),
                ("line2", models.CharField(blank=True, max_length=300, null=True)),
                ("city", models.CharField(blank=True, max_length=200, null=True)),
                ("state", models.CharField(blank=True, max_length=200, null=True)),
                ("postal_code", models.CharField(blank=True, max_length=50, null=True)),
                ("country", models.CharField(blank=True, max_length=100, null=True)),
                ("create_date", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "registration",
                "db_table": "customer_info",
                "ordering": ["-id"],
            },
        ),
        migrations.CreateModel(
            name="PaymentLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("content", models.TextField()),
                (
                    "type",
                    models.PositiveSmallIntegerField(
                        choices=[
                            (0, "Client report"),
                            (1, "Checkout session completed"),
                            (4, "Checkout line items"),
                        ]
                    ),
                ),
                ("customer_id", models.BigIntegerField(blank=True, db_index=True, null=True)),
                ("create_time", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "payment_log",
                "ordering": ["-create_time", "-id"],
            },
        ),
        migrations.CreateModel(
            name="StripeEvent",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("stripe_id", models.CharField(max_length=200, unique=True)),
                ("kind", models.CharField(max_length=200)),
                ("livemode", models.BooleanField(default=False)),
                ("payload", models.JSONField(default=dict)),
                ("processed", models.BooleanField(default=False)),
                ("api_version", models.CharField(blank=True, default="", max_length=50)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="EventProcessingException",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("data", models.TextField(blank=True, default="")),
                ("message", models.CharField(max_length=500)),
                ("traceback", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "event",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="exceptions",
                        to="confreg_registration.stripeevent",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
