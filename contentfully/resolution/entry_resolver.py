"""Entry resolver.

Turns deferred raw entries into models by dereferencing every link through
the link index. Each id is resolved at most once; every referrer receives
the same model dict. A reference back to an entry that is still being
resolved returns that entry's in-progress model, which is how cycles
terminate.
"""

import logging
from typing import Any

from contentfully.domain.constants import MODEL_ID, MODEL_TYPE, MODEL_UPDATED_AT
from contentfully.domain.enums import FieldKind, LinkType, SlotState
from contentfully.domain.models import Reference, classify_value, is_empty
from contentfully.resolution.link_index import LinkIndex, LinkSlot

logger = logging.getLogger(__name__)


class EntryResolver:
    """Resolves entries and links against a link index.

    Args:
        index: Link index for the current query. Slots are mutated in place.
        multi_locale: Whether field values are locale maps.
    """

    def __init__(self, index: LinkIndex, multi_locale: bool = False) -> None:
        self._index = index
        self._multi_locale = multi_locale

    def resolve_items(self, records: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Resolve top-level records into models, preserving order."""
        models = []
        for record in records:
            slot = self._index.get(record['sys']['id'])
            if slot is None:
                slot = LinkSlot.deferred(record)
                self._index.set(record['sys']['id'], slot)
            models.append(self._resolve_slot(slot))
        return models

    def resolve_entry(self, record: dict[str, Any]) -> dict[str, Any]:
        """Resolve all fields of a raw entry.

        Returns:
            Field name → resolved value, with empty values left out.
        """
        fields: dict[str, Any] = {}
        for key, value in (record.get('fields') or {}).items():
            if classify_value(value, self._multi_locale) is FieldKind.LOCALE_MAP:
                resolved = self._resolve_locale_map(value)
            else:
                resolved = self.resolve_value(value)
            if not is_empty(resolved):
                fields[key] = resolved
        return fields

    def resolve_value(self, value: Any, locale: str | None = None) -> Any:
        """Resolve a single-locale value: sequence, reference or scalar."""
        kind = classify_value(value)
        if kind is FieldKind.SEQUENCE:
            return self._resolve_sequence(value, locale)
        if kind is FieldKind.REFERENCE:
            return self.resolve_reference(Reference.from_value(value), locale)
        return value

    def resolve_field_value_at_locale(self, value: Any, locale: str) -> Any:
        """Resolve the value of one field at one locale.

        Asset links pick the media variant produced for ``locale``.
        """
        return self.resolve_value(value, locale)

    def resolve_reference(self, ref: Reference, locale: str | None = None) -> Any:
        """Dereference a link.

        Returns:
            The shared model or media descriptor, or None when the target is
            not in the index (or has no variant for ``locale``).
        """
        slot = self._index.get(ref.id)
        if slot is None:
            logger.debug("Unresolved link %s (%s)", ref.id, ref.link_type.value)
            return None

        if slot.state is SlotState.RESOLVED:
            if slot.is_locale_map and locale is not None:
                return slot.value.get(locale)
            return slot.value

        return self._resolve_slot(slot)

    # ── Private Methods ──────────────────────────────────────────────────

    def _resolve_locale_map(self, value: dict[str, Any]) -> dict[str, Any]:
        """Resolve a locale → value map, dropping empty locales.

        A non-localized media field only carries the default locale, so an
        asset link also contributes the asset's variants for every other
        locale.
        """
        by_locale: dict[str, Any] = {}
        asset_variants: dict[str, Any] = {}
        for locale, localized in value.items():
            resolved = self.resolve_field_value_at_locale(localized, locale)
            if not is_empty(resolved):
                by_locale[locale] = resolved
            ref = Reference.from_value(localized)
            if ref is not None and ref.link_type is LinkType.ASSET:
                slot = self._index.get(ref.id)
                if slot is not None and slot.is_locale_map:
                    for variant_locale, media in slot.value.items():
                        asset_variants.setdefault(variant_locale, media)

        for locale, media in asset_variants.items():
            by_locale.setdefault(locale, media)
        return by_locale

    def _resolve_sequence(self, values: list[Any], locale: str | None) -> list[Any]:
        resolved = (self.resolve_value(item, locale) for item in values)
        return [item for item in resolved if not is_empty(item)]

    def _resolve_slot(self, slot: LinkSlot) -> dict[str, Any]:
        if slot.state is not SlotState.DEFERRED:
            # RESOLVED, or RESOLVING when a cycle leads back here
            return slot.value

        record = slot.record
        model = self._metadata(record)
        slot.begin(model)

        model.update(self.resolve_entry(record))
        model.update(self._metadata(record))

        slot.finish()
        return model

    @staticmethod
    def _metadata(record: dict[str, Any]) -> dict[str, Any]:
        sys = record['sys']
        meta = {
            MODEL_ID: sys['id'],
            MODEL_TYPE: sys['contentType']['sys']['id'],
        }
        if sys.get('updatedAt'):
            meta[MODEL_UPDATED_AT] = sys['updatedAt']
        return meta
