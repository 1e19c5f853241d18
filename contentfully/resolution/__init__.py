"""Link graph resolution."""

from contentfully.resolution.entry_resolver import EntryResolver
from contentfully.resolution.link_index import LinkIndex, LinkIndexBuilder, LinkSlot
from contentfully.resolution.locale_flattener import LocaleFlattener
from contentfully.resolution.media_resolver import MediaResolver

__all__ = [
    'EntryResolver', 'LinkIndex', 'LinkIndexBuilder',
    'LinkSlot', 'LocaleFlattener', 'MediaResolver',
]
