"""Query entry points: fetch a payload, resolve its link graph, return models.

Orchestrates the link index builder, entry resolver and (for ``locale='*'``
queries) the locale flattener over one upstream response.
"""

import asyncio
import inspect
import logging
import re
from typing import Any, Callable

from contentfully.domain.constants import (
    DEFAULT_INCLUDE_DEPTH,
    DEFAULT_LIMIT,
    DEFAULT_SELECT_FIELDS,
    ENTRIES_PATH,
    MULTI_LOCALE,
    SYSTEM_SELECTS,
)
from contentfully.domain.models import QueryOptions, QueryResult
from contentfully.resolution.entry_resolver import EntryResolver
from contentfully.resolution.link_index import LinkIndexBuilder
from contentfully.resolution.locale_flattener import LocaleFlattener
from contentfully.resolution.media_resolver import MediaResolver

_WHITESPACE_RE = re.compile(r'\s+')


def build_select(select: str | None) -> str:
    """Normalize a select clause and prepend the system fields.

    Examples:
        >>> build_select(None)
        'sys.id,sys.contentType,sys.updatedAt,fields'
        >>> build_select('sys.id, fields.title')
        'sys.id,sys.contentType,sys.updatedAt,fields.title'
    """
    parts = [DEFAULT_SELECT_FIELDS]
    if select:
        cleaned = _WHITESPACE_RE.sub('', select)
        parts = [p for p in cleaned.split(',') if p and p not in SYSTEM_SELECTS]
    return ','.join([*SYSTEM_SELECTS, *parts])


class Contentfully:
    """Resolves Delivery API responses into linked model graphs.

    Args:
        contentful: Upstream client exposing ``query(path, params)`` and
            ``get_locales()``. Methods may be blocking or coroutines.
        logger: Logger handed to the media resolver.
    """

    def __init__(self, contentful: Any, logger: logging.Logger | None = None) -> None:
        self.contentful = contentful
        self._logger = logger or logging.getLogger(__name__)

    async def get_model(self, model_id: str, options: QueryOptions | None = None) -> dict[str, Any] | None:
        """Resolve a single entry by id, or None if the API returns nothing."""
        result = await self._query(ENTRIES_PATH, {'sys.id': model_id, 'limit': 1}, options)
        return result.items[0] if result.items else None

    async def get_models(
        self,
        query: dict[str, Any] | None = None,
        options: QueryOptions | None = None,
    ) -> QueryResult:
        """Resolve a filtered/paginated set of entries.

        With ``query['locale'] == '*'`` the result items are a mapping of
        locale code → models instead of a list.
        """
        return await self._query(ENTRIES_PATH, query or {}, options)

    async def _query(
        self,
        path: str,
        query: dict[str, Any],
        options: QueryOptions | None,
    ) -> QueryResult:
        options = options or QueryOptions()
        params = {
            'include': DEFAULT_INCLUDE_DEPTH,
            'limit': DEFAULT_LIMIT,
            **query,
            'select': build_select(query.get('select')),
        }
        multi_locale = query.get('locale') == MULTI_LOCALE

        payload = await self._call(self.contentful.query, path, params)

        media = MediaResolver(options.media_transform, logger=self._logger)
        index = await LinkIndexBuilder(media).build(payload, multi_locale)
        items: Any = EntryResolver(index, multi_locale).resolve_items(payload.get('items') or [])
        self._logger.debug("Resolved %d items from %d linked records", len(items), len(index))

        if multi_locale:
            catalog = await self._call(self.contentful.get_locales)
            items = LocaleFlattener.from_catalog(catalog).flatten(items)

        return QueryResult(
            items=items,
            skip=payload.get('skip', 0),
            limit=payload.get('limit', 0),
            total=payload.get('total', 0),
        )

    @staticmethod
    async def _call(fn: Callable[..., Any], *args: Any) -> Any:
        if inspect.iscoroutinefunction(fn):
            return await fn(*args)
        return await asyncio.to_thread(fn, *args)
