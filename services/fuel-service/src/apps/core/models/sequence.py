# services/fuel-service/src/apps/core/models/sequence.py
"""
Document Sequence Model

Counters behind human-readable document numbers.
"""

from django.db import models


class DocumentSequence(models.Model):
    """
    Last issued value for a document prefix within a period.

    Rows are locked with select_for_update while a number is issued,
    so concurrent requests never receive the same value.
    """

    prefix = models.CharField(max_length=10)
    period = models.CharField(
        max_length=8,
        blank=True,
        default='',
        help_text='YYYYMMDD for daily counters, empty for running counters'
    )
    last_value = models.BigIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'document_sequences'
        constraints = [
            models.UniqueConstraint(
                fields=['prefix', 'period'],
                name='uq_document_sequence_prefix_period'
            ),
        ]

    def __str__(self):
        return f"{self.prefix}/{self.period or '-'}: {self.last_value}"
