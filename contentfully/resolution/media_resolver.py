"""Media resolver for asset records.

Converts raw asset records into media descriptors:
  {sys, fields: {file, description}} → {id, url, contentType, dimensions, size, ...}
"""

import asyncio
import inspect
import logging
from typing import Any

from contentfully.domain.models import MediaTransform


class MediaResolver:
    """Builds media descriptors and applies the optional media transform.

    Args:
        media_transform: Hook applied to every descriptor (sync or async).
        logger: Logger used to report per-locale transform failures.
    """

    def __init__(
        self,
        media_transform: MediaTransform | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._transform = media_transform
        self._logger = logger or logging.getLogger(__name__)

    async def resolve_asset(self, asset: dict[str, Any]) -> dict[str, Any]:
        """Resolve an asset whose fields hold single values.

        Transform failures propagate to the caller.
        """
        return await self.to_media(asset['sys'], asset['fields'])

    async def resolve_asset_by_locale(self, asset: dict[str, Any]) -> dict[str, dict[str, Any]]:
        """Resolve an asset whose fields are locale maps.

        Each locale variant is resolved independently. A locale without a
        file, or whose transform fails, is left out of the result.

        Returns:
            Locale code → media descriptor.
        """
        groups = {
            locale: group
            for locale, group in self.group_by_locale(asset).items()
            if group['fields'].get('file')
        }
        locales = list(groups)
        results = await asyncio.gather(
            *(self._resolve_locale(locale, groups[locale]) for locale in locales)
        )
        return {
            locale: media
            for locale, media in zip(locales, results)
            if media is not None
        }

    async def to_media(self, sys: dict[str, Any], fields: dict[str, Any]) -> dict[str, Any]:
        """Build a media descriptor from asset metadata and fields."""
        file = fields['file']
        details = file.get('details') or {}
        image = details.get('image')

        media: dict[str, Any] = {
            'id': sys['id'],
            'url': file['url'],
            'description': fields.get('description'),
            'contentType': file.get('contentType'),
            'size': details.get('size'),
            'version': sys.get('revision'),
        }
        if image:
            media['dimensions'] = {k: image[k] for k in ('width', 'height') if k in image}
        media = {k: v for k, v in media.items() if v is not None}

        if self._transform is not None:
            media = self._transform(media)
            if inspect.isawaitable(media):
                media = await media

        return media

    @staticmethod
    def group_by_locale(asset: dict[str, Any]) -> dict[str, dict[str, Any]]:
        """Pivot field → locale → value into locale → {sys, fields}."""
        locales: dict[str, dict[str, Any]] = {}
        for key, by_locale in (asset.get('fields') or {}).items():
            for locale, value in by_locale.items():
                group = locales.setdefault(locale, {'sys': asset['sys'], 'fields': {}})
                group['fields'][key] = value
        return locales

    # ── Private Methods ──────────────────────────────────────────────────

    async def _resolve_locale(self, locale: str, group: dict[str, Any]) -> dict[str, Any] | None:
        try:
            return await self.to_media(group['sys'], group['fields'])
        except Exception:
            self._logger.exception(
                "Failed to create media for asset %s (locale %s)",
                group['sys'].get('id'), locale,
            )
            return None
