"""Link index: id → slot mapping used to dereference links.

Slots move DEFERRED → RESOLVING → RESOLVED as entries are resolved. Assets
are resolved while the index is built and start out RESOLVED.
"""

from dataclasses import dataclass
from typing import Any, Iterator

from contentfully.domain.enums import SlotState
from contentfully.resolution.media_resolver import MediaResolver


@dataclass
class LinkSlot:
    """One record's place in the index.

    ``record`` holds the raw record while DEFERRED; ``value`` holds the
    (possibly in-progress) model once resolution has started.
    """

    state: SlotState
    record: dict[str, Any] | None = None
    value: Any = None
    is_locale_map: bool = False

    @classmethod
    def deferred(cls, record: dict[str, Any]) -> 'LinkSlot':
        return cls(state=SlotState.DEFERRED, record=record)

    @classmethod
    def resolved(cls, value: Any, is_locale_map: bool = False) -> 'LinkSlot':
        return cls(state=SlotState.RESOLVED, value=value, is_locale_map=is_locale_map)

    def begin(self, model: dict[str, Any]) -> None:
        """Mark resolution in progress; ``model`` is shared with referrers."""
        self.state = SlotState.RESOLVING
        self.value = model

    def finish(self) -> None:
        self.state = SlotState.RESOLVED
        self.record = None


class LinkIndex:
    """Mapping from record id to its link slot."""

    def __init__(self) -> None:
        self._slots: dict[str, LinkSlot] = {}

    def get(self, record_id: str) -> LinkSlot | None:
        return self._slots.get(record_id)

    def set(self, record_id: str, slot: LinkSlot) -> None:
        self._slots[record_id] = slot

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._slots

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[str]:
        return iter(self._slots)


class LinkIndexBuilder:
    """Builds the link index from a raw query payload.

    Precedence for a shared id: included assets < included entries < items.

    Args:
        media_resolver: Resolver used for included assets.
    """

    def __init__(self, media_resolver: MediaResolver) -> None:
        self._media = media_resolver

    async def build(self, payload: dict[str, Any], multi_locale: bool = False) -> LinkIndex:
        index = LinkIndex()
        includes = payload.get('includes') or {}

        for asset in includes.get('Asset') or []:
            if multi_locale:
                media = await self._media.resolve_asset_by_locale(asset)
            else:
                media = await self._media.resolve_asset(asset)
            index.set(asset['sys']['id'], LinkSlot.resolved(media, is_locale_map=multi_locale))

        for entry in includes.get('Entry') or []:
            index.set(entry['sys']['id'], LinkSlot.deferred(entry))

        for entry in payload.get('items') or []:
            index.set(entry['sys']['id'], LinkSlot.deferred(entry))

        return index
