# services/fuel-service/src/apps/core/services/numbering.py
"""
Document Number Service

Human-readable numbers for orders, deliveries, fueling operations and
inventory transactions.
"""

import logging
from datetime import datetime, timezone as dt_timezone
from enum import Enum

from django.db import transaction
from django.utils import timezone

from ..models import DocumentSequence
from .exceptions import FuelValidationError, store_operation

logger = logging.getLogger(__name__)


class DocumentKind(str, Enum):
    """Numbered document kinds and their prefixes."""
    ORDER = 'FO'
    DELIVERY = 'DL'
    OPERATION = 'OP'
    INVENTORY = 'IT'

    @property
    def prefix(self) -> str:
        return self.value


class DocumentNumberService:
    """
    Issues document numbers from counters kept in DocumentSequence.

    Daily kinds are numbered PREFIX-YYYYMMDD-NNNN, restarting at 0001
    each UTC day. Inventory transactions are numbered IT-<epoch millis>,
    bumped past the last issued value when two posts share a millisecond.

    Counters advance inside the caller's transaction, so a document that
    is rolled back gives its number back as well.
    """

    COUNTER_WIDTH = 4

    @classmethod
    @store_operation
    @transaction.atomic
    def generate(cls, kind: DocumentKind, now: datetime = None) -> str:
        """
        Issue the next number for a document kind.

        Args:
            kind: Document kind, or its name or prefix
            now: Issue time, defaults to the current time

        Returns:
            Document number string
        """
        kind = cls._resolve_kind(kind)
        now = now or timezone.now()
        if timezone.is_aware(now):
            now = now.astimezone(dt_timezone.utc)

        if kind == DocumentKind.INVENTORY:
            now_ms = int(now.timestamp() * 1000)
            value = cls._advance(kind.prefix, '', floor=now_ms)
            number = f"{kind.prefix}-{value}"
        else:
            period = now.strftime('%Y%m%d')
            value = cls._advance(kind.prefix, period)
            number = f"{kind.prefix}-{period}-{value:0{cls.COUNTER_WIDTH}d}"

        logger.debug(f"Issued document number {number}", extra={'kind': kind.name})
        return number

    @staticmethod
    def _resolve_kind(kind) -> DocumentKind:
        """Accept a DocumentKind, a kind name such as ORDER, or a prefix."""
        if isinstance(kind, DocumentKind):
            return kind
        if kind in DocumentKind.__members__:
            return DocumentKind[kind]
        try:
            return DocumentKind(kind)
        except ValueError:
            raise FuelValidationError(f"Unknown document kind: {kind}", field='kind')

    @staticmethod
    def _advance(prefix: str, period: str, floor: int = 0) -> int:
        """Lock the counter row and move it forward, to at least floor."""
        sequence, _ = DocumentSequence.objects.select_for_update().get_or_create(
            prefix=prefix,
            period=period,
        )
        sequence.last_value = max(sequence.last_value + 1, floor)
        sequence.save(update_fields=['last_value', 'updated_at'])
        return sequence.last_value
