# shared/common/pagination.py
"""
Page number pagination with the success envelope used by list endpoints.
"""

from typing import Any, Dict

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardPagination(PageNumberPagination):
    """Default list pagination: 20 per page, up to 100 on request."""

    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100

    def get_paginated_response(self, data: Any) -> Response:
        paginator = self.page.paginator
        return Response({
            'success': True,
            'count': paginator.count,
            'total_pages': paginator.num_pages,
            'current_page': self.page.number,
            'page_size': self.get_page_size(self.request),
            'next': self.get_next_link(),
            'previous': self.get_previous_link(),
            'results': data,
        })

    def get_paginated_response_schema(self, schema: Dict) -> Dict:
        return {
            'type': 'object',
            'required': ['success', 'count', 'results'],
            'properties': {
                'success': {'type': 'boolean'},
                'count': {'type': 'integer'},
                'total_pages': {'type': 'integer'},
                'current_page': {'type': 'integer'},
                'page_size': {'type': 'integer'},
                'next': {'type': 'string', 'format': 'uri', 'nullable': True},
                'previous': {'type': 'string', 'format': 'uri', 'nullable': True},
                'results': schema,
            },
        }


class LedgerPagination(StandardPagination):
    """Inventory ledgers are read in bulk for audits."""

    page_size = 100
    max_page_size = 1000
