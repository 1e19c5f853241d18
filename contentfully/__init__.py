"""Resolve Contentful Delivery API payloads into linked model graphs."""

from contentfully.domain.models import Locale, QueryOptions, QueryResult, Reference
from contentfully.service import Contentfully, build_select

__all__ = [
    'Contentfully', 'QueryOptions', 'QueryResult',
    'Locale', 'Reference', 'build_select',
]
