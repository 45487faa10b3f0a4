# services/fuel-service/src/apps/core/services/base.py
"""
Shared lookups for the document services.
"""

import uuid
from typing import Type, TypeVar

from django.core.exceptions import ValidationError
from django.db import models

from .exceptions import DocumentNotFoundError

ModelT = TypeVar('ModelT', bound=models.Model)


def get_document(
    model: Type[ModelT],
    document_id: uuid.UUID,
    for_update: bool = False
) -> ModelT:
    """
    Get a document by ID, optionally locking its row.

    Args:
        model: Model class of the document
        document_id: Document UUID
        for_update: Lock the row until the surrounding transaction ends

    Returns:
        Model instance

    Raises:
        DocumentNotFoundError: If no such document exists
    """
    queryset = model.objects.all()
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=document_id)
    except (model.DoesNotExist, ValidationError, ValueError):
        raise DocumentNotFoundError(
            document_type=model._meta.verbose_name.title().replace(' ', ''),
            document_id=document_id
        )
