from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="VisaRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=50)),
                ("other_title", models.CharField(blank=True, max_length=100, null=True)),
                ("first_name", models.CharField(max_length=200)),
                ("middle_name", models.CharField(blank=True, max_length=200, null=True)),
                ("last_name", models.CharField(max_length=200)),
                ("email", models.EmailField(max_length=254)),
                ("date_of_birth", models.DateField(blank=True, null=True)),
                ("nationality", models.CharField(blank=True, max_length=200, null=True)),
                ("institute", models.CharField(blank=True, max_length=300, null=True)),
                ("paper_number", models.CharField(blank=True, max_length=100, null=True)),
                ("paper_title", models.CharField(blank=True, max_length=500, null=True)),
                ("academic_profile", models.TextField(blank=True, null=True)),
                ("conference_interests", models.TextField(blank=True, null=True)),
                ("iacr_experience", models.TextField(blank=True, null=True)),
                ("has_iacr", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("file_key", models.CharField(blank=True, max_length=500, null=True)),
                ("file_name", models.CharField(blank=True, max_length=255, null=True)),
                (
                    "type",
                    models.PositiveSmallIntegerField(
                        choices=[
                            (0, "Visa invitation letter"),
                            (1, "Student travel stipend"),
                            (2, "Student registration waiver"),
                        ],
                        default=0,
                    ),
                ),
                ("create_date", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "asiacrypt_visa_request",
                "ordering": ["-create_date", "-id"],
            },
        ),
    ]
