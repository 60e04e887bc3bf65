"""Inquiry and FollowUp models.

An ``Inquiry`` is created once from the public submission form and is only
mutated afterwards through status changes. ``FollowUp`` rows are append-only
notes staff attach to an inquiry.
"""

import logging
import secrets
import time

from django.conf import settings
from django.db import IntegrityError, models, transaction
from django.utils.translation import gettext_lazy as _

from api.utils.helper_models import TimeStampedModel

logger = logging.getLogger(__name__)

REFERENCE_CODE_MAX_ATTEMPTS = 5


class ReferenceCodeConflict(IntegrityError):
    """Raised when a reference code cannot be inserted because it already exists."""

    def __init__(self, reference_code, attempts=1):
        self.reference_code = reference_code
        self.attempts = attempts
        super().__init__(f"Reference code {reference_code} already exists.")


def generate_reference_code(prefix=None):
    """
    Build a new reference code: prefix + epoch milliseconds + 4 random digits.

    Example: ``INQ17290000000001234``. The random tail keeps two submissions in
    the same millisecond apart; the unique constraint on the column catches
    whatever still collides.
    """
    prefix = (prefix or getattr(settings, "INQUIRY_REFERENCE_PREFIX", "INQ")).upper()
    millis = int(time.time() * 1000)
    return f"{prefix}{millis}{secrets.randbelow(10_000):04d}"


# -----------------------------------------------------------
# Manager
# -----------------------------------------------------------


class InquiryManager(models.Manager):
    """Manager that owns reference code issuance for new inquiries."""

    def create_inquiry(self, reference_code=None, **fields):
        """
        Insert a new inquiry, issuing its reference code exactly once before commit.

        A generated code that collides is regenerated up to
        ``REFERENCE_CODE_MAX_ATTEMPTS`` times. A caller-supplied code is tried once.
        Raises ``ReferenceCodeConflict`` when no unique code could be stored.
        """
        supplied = bool(reference_code and str(reference_code).strip())
        attempts = 1 if supplied else REFERENCE_CODE_MAX_ATTEMPTS

        code = None
        for attempt in range(1, attempts + 1):
            code = str(reference_code).strip().upper() if supplied else generate_reference_code()
            inquiry = self.model(reference_code=code, **fields)
            try:
                with transaction.atomic(using=self.db):
                    inquiry.save(force_insert=True, using=self.db)
                return inquiry
            except IntegrityError:
                if not self.filter(reference_code=code).exists():
                    raise
                logger.warning(f"Reference code collision on {code} (attempt {attempt}/{attempts})")

        raise ReferenceCodeConflict(code, attempts)


# -----------------------------------------------------------
# Models
# -----------------------------------------------------------


class Inquiry(TimeStampedModel):
    """A service inquiry submitted through the public form."""

    class ServiceType(models.TextChoices):
        WEB_DEVELOPMENT = "Web Development", _("Web Development")
        MOBILE_APP = "Mobile App", _("Mobile App")
        DIGITAL_MARKETING = "Digital Marketing", _("Digital Marketing")
        CONSULTING = "Consulting", _("Consulting")
        OTHER = "Other", _("Other")

    class Status(models.TextChoices):
        NEW = "New", _("New")
        IN_PROGRESS = "In Progress", _("In Progress")
        IN_ACTION = "In Action", _("In Action")
        DONE = "Done", _("Done")

    reference_code = models.CharField(
        max_length=32,
        unique=True,
        editable=False,
        help_text="Public tracking code, issued once at creation. Always uppercase.",
    )
    name = models.CharField(max_length=150, help_text="Client name (max 150 chars).")
    phone = models.CharField(max_length=30, db_index=True, help_text="Client phone number (max 30 chars).")
    email = models.EmailField(blank=True, default="", help_text="Optional contact email, stored lowercase.")
    service_type = models.CharField(max_length=32, choices=ServiceType.choices)
    message = models.TextField()
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.NEW, db_index=True)

    objects = InquiryManager()

    class Meta:
        verbose_name = "Inquiry"
        verbose_name_plural = "Inquiries"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.reference_code} - {self.name} ({self.status})"

    def save(self, *args, **kwargs):
        # Canonical casing is enforced at write time; the code itself is never regenerated here.
        if self.reference_code:
            self.reference_code = self.reference_code.strip().upper()
        if self.email:
            self.email = self.email.strip().lower()
        super().save(*args, **kwargs)


class FollowUp(TimeStampedModel):
    """Append-only staff note attached to an inquiry."""

    inquiry = models.ForeignKey(
        Inquiry,
        on_delete=models.CASCADE,
        related_name="follow_ups",
        help_text="The inquiry this note belongs to.",
    )
    note = models.TextField()
    next_follow_up_date = models.DateTimeField(help_text="When the client should be contacted next.")

    class Meta:
        verbose_name = "Follow-up"
        verbose_name_plural = "Follow-ups"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"Follow-up on {self.inquiry_id} @ {self.created_at:%Y-%m-%d %H:%M}"
