"""Abstract model helpers shared by the API models."""

from django.db import models


class TimeStampedModel(models.Model):
    """Adds store-maintained ``created_at`` / ``updated_at`` columns."""

    created_at = models.DateTimeField(auto_now_add=True, db_index=True, help_text="Set once when the row is created.")
    updated_at = models.DateTimeField(auto_now=True, help_text="Refreshed on every save.")

    class Meta:
        abstract = True
