"""Shared data models used across resolution and query modules."""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Union

from contentfully.domain.constants import LINK_SYS_TYPE
from contentfully.domain.enums import FieldKind, LinkType

# A media hook may be a plain function or a coroutine function
MediaTransform = Callable[[dict[str, Any]], Union[dict[str, Any], Awaitable[dict[str, Any]]]]


@dataclass(frozen=True)
class Reference:
    """A field value naming another record by id."""

    id: str
    link_type: LinkType = LinkType.ENTRY

    @classmethod
    def from_value(cls, value: Any) -> 'Reference | None':
        """Build a reference from a raw ``{"sys": {"type": "Link", ...}}`` value.

        Returns:
            The reference, or None if the value is not a link.
        """
        if not isinstance(value, dict):
            return None
        sys = value.get('sys')
        if not isinstance(sys, dict) or sys.get('type') != LINK_SYS_TYPE:
            return None
        try:
            link_type = LinkType(sys.get('linkType', LinkType.ENTRY.value))
        except ValueError:
            link_type = LinkType.ENTRY
        return cls(id=sys['id'], link_type=link_type)


@dataclass
class Locale:
    """A locale declared by the space."""

    code: str
    name: str = ''
    default: bool = False
    fallback_code: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Locale':
        return cls(
            code=data['code'],
            name=data.get('name') or '',
            default=bool(data.get('default')),
            fallback_code=data.get('fallbackCode'),
        )


@dataclass
class QueryOptions:
    """Options controlling how a query result is resolved."""

    media_transform: MediaTransform | None = None


@dataclass
class QueryResult:
    """Resolved items plus the pagination echo of the upstream response.

    ``items`` is a list of models, or a locale code → models mapping when
    the query asked for every locale.
    """

    items: list[dict[str, Any]] | dict[str, list[dict[str, Any]]] = field(default_factory=list)
    skip: int = 0
    limit: int = 0
    total: int = 0


def classify_value(value: Any, multi_locale: bool = False) -> FieldKind:
    """Classify a raw field value.

    In multi-locale payloads every top-level field value is a locale map;
    the values inside it are classified as single-locale values.
    """
    if multi_locale and isinstance(value, dict):
        return FieldKind.LOCALE_MAP
    if isinstance(value, list):
        return FieldKind.SEQUENCE
    if Reference.from_value(value) is not None:
        return FieldKind.REFERENCE
    return FieldKind.SCALAR


def is_empty(value: Any) -> bool:
    """True for values that must not appear on a resolved model.

    Numbers and booleans are never empty.
    """
    if value is None:
        return True
    if isinstance(value, (str, list, dict)):
        return not value
    return False
