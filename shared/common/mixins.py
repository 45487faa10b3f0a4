# shared/common/mixins.py
"""
Abstract model mixins shared by the service models.
"""

import uuid

from django.db import models


class UUIDPrimaryKeyMixin(models.Model):
    """Random UUID primary key, so ids can be handed out before saving."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )

    class Meta:
        abstract = True


class TimestampMixin(models.Model):
    """Creation and last-modification times, both set by Django."""

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class ActiveFlagMixin(models.Model):
    """Retirement flag for master data that is referenced by documents."""

    is_active = models.BooleanField(
        default=True,
        db_index=True,
        help_text='Inactive records stay referenced by past documents but are not offered for new ones'
    )

    class Meta:
        abstract = True
