"""Shared constants for query construction and locale handling."""

# ── Query Defaults ───────────────────────────────────────────────────────

# System fields always selected so every model carries its metadata
DEFAULT_SELECT_ID = 'sys.id'
DEFAULT_SELECT_CONTENT_TYPE = 'sys.contentType'
DEFAULT_SELECT_UPDATED_AT = 'sys.updatedAt'

SYSTEM_SELECTS: tuple[str, ...] = (
    DEFAULT_SELECT_ID,
    DEFAULT_SELECT_CONTENT_TYPE,
    DEFAULT_SELECT_UPDATED_AT,
)

DEFAULT_SELECT_FIELDS = 'fields'

DEFAULT_INCLUDE_DEPTH = 10
DEFAULT_LIMIT = 1000

ENTRIES_PATH = '/entries'
LOCALES_PATH = '/locales'

# ── Locales ──────────────────────────────────────────────────────────────

# Query locale that asks the API for every locale at once
MULTI_LOCALE = '*'

# Used when the locale catalog flags no default
FALLBACK_LOCALE = 'en-US'

# ── Model Metadata Keys ──────────────────────────────────────────────────

MODEL_ID = 'id'
MODEL_TYPE = 'type'
MODEL_UPDATED_AT = 'updatedAt'

# ── Link Markers ─────────────────────────────────────────────────────────

LINK_SYS_TYPE = 'Link'
