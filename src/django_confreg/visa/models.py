"""Visa invitation and travel support request models."""

from django.db import models


class VisaRequest(models.Model):
    """A visa-invitation, travel-stipend, or student-waiver application.

    Created once on submission and never edited afterwards. Applications
    that carry a document store only its object-storage key and the
    original file name.
    """

    class Kind(models.IntegerChoices):
        """Which request form produced the record."""

        VISA = 0, "Visa invitation letter"
        TRAVEL_STIPEND = 1, "Student travel stipend"
        STUDENT_WAIVER = 2, "Student registration waiver"

    title = models.CharField(max_length=50)
    other_title = models.CharField(max_length=100, blank=True, null=True)
    first_name = models.CharField(max_length=200)
    middle_name = models.CharField(max_length=200, blank=True, null=True)
    last_name = models.CharField(max_length=200)
    email = models.EmailField(max_length=254)
    date_of_birth = models.DateField(blank=True, null=True)
    nationality = models.CharField(max_length=200, blank=True, null=True)
    institute = models.CharField(max_length=300, blank=True, null=True)
    paper_number = models.CharField(max_length=100, blank=True, null=True)
    paper_title = models.CharField(max_length=500, blank=True, null=True)
    academic_profile = models.TextField(blank=True, null=True)
    conference_interests = models.TextField(blank=True, null=True)
    iacr_experience = models.TextField(blank=True, null=True)
    has_iacr = models.PositiveSmallIntegerField(blank=True, null=True)
    file_key = models.CharField(max_length=500, blank=True, null=True)
    file_name = models.CharField(max_length=255, blank=True, null=True)
    type = models.PositiveSmallIntegerField(choices=Kind.choices, default=Kind.VISA)
    create_date = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "asiacrypt_visa_request"
        ordering = ["-create_date", "-id"]

    def __str__(self) -> str:
        return f"{self.get_type_display()}: {self.first_name} {self.last_name}"
