"""Domain enums for the content graph resolver."""
from enum import Enum


class SlotState(Enum):
    """Lifecycle of a link slot within one query."""
    DEFERRED = "DEFERRED"
    RESOLVING = "RESOLVING"
    RESOLVED = "RESOLVED"


class LinkType(Enum):
    """Kinds of record a reference may point at."""
    ENTRY = "Entry"
    ASSET = "Asset"


class FieldKind(Enum):
    """Shapes a raw field value can take."""
    SCALAR = "SCALAR"
    REFERENCE = "REFERENCE"
    SEQUENCE = "SEQUENCE"
    LOCALE_MAP = "LOCALE_MAP"
