"""Locale flattener.

Splits models whose fields are locale maps into one plain model tree per
locale, e.g. for locales en-US (default) and fr:

  {title: {en-US: "Hi", fr: "Salut"}, tags: {en-US: ["a"]}}
    → en-US: {title: "Hi", tags: ["a"]}
    → fr:    {title: "Salut", tags: ["a"]}
"""

from collections import deque
from typing import Any

from contentfully.domain.constants import FALLBACK_LOCALE, MODEL_ID, MODEL_TYPE
from contentfully.domain.models import Locale

_UNSET = object()


class LocaleFlattener:
    """Projects multi-locale models onto each declared locale.

    Missing values follow the fallbackCode chain, then the default locale.
    An object already on the current path (a reference cycle) is emitted as
    an {id, type} stub.

    Args:
        locales: Locales declared by the space, in catalog order.
    """

    def __init__(self, locales: list[Locale]) -> None:
        self._locales = locales
        self._codes = {locale.code for locale in locales}
        self._fallbacks = {locale.code: locale.fallback_code for locale in locales}
        default = next((locale for locale in locales if locale.default), None)
        self.default_locale = default.code if default else FALLBACK_LOCALE

    @classmethod
    def from_catalog(cls, catalog: dict[str, Any]) -> 'LocaleFlattener':
        """Build from a locale catalog response ``{items: [{code, default}]}``."""
        return cls([Locale.from_dict(item) for item in catalog.get('items') or []])

    def flatten(self, items: list[dict[str, Any]]) -> dict[str, list[dict[str, Any]]]:
        """Flatten every model for every locale.

        Returns:
            Locale code → flattened models, in input order.
        """
        return {
            locale.code: [self.flatten_model(item, locale.code) for item in items]
            for locale in self._locales
        }

    def flatten_model(self, model: dict[str, Any], locale: str) -> dict[str, Any]:
        """Flatten one model tree for one locale (breadth-first)."""
        root: dict[str, Any] = {}
        queue: deque = deque([(root, model, frozenset())])

        while queue:
            output, source, path = queue.popleft()
            path = path | {id(source)}
            for key, value in source.items():
                value = self._select(value, locale)
                if value is _UNSET:
                    continue
                output[key] = self._branch(value, path, queue)

        return root

    def fallback_chain(self, locale: str) -> list[str]:
        """Locales tried for ``locale``: itself, its fallbackCode chain, then the default."""
        chain: list[str] = []
        code: str | None = locale
        while code and code not in chain:
            chain.append(code)
            code = self._fallbacks.get(code)
        if self.default_locale not in chain:
            chain.append(self.default_locale)
        return chain

    # ── Private Methods ──────────────────────────────────────────────────

    def _select(self, value: Any, locale: str) -> Any:
        if value is None:
            return _UNSET
        if not self._is_locale_map(value):
            return value
        for code in self.fallback_chain(locale):
            if code in value:
                return value[code]
        return _UNSET

    def _is_locale_map(self, value: Any) -> bool:
        return isinstance(value, dict) and bool(value) and all(k in self._codes for k in value)

    def _branch(self, value: Any, path: frozenset, queue: deque) -> Any:
        if isinstance(value, list):
            return [self._branch(item, path, queue) for item in value]
        if isinstance(value, dict):
            if id(value) in path:
                return {k: value[k] for k in (MODEL_ID, MODEL_TYPE) if k in value}
            nested: dict[str, Any] = {}
            queue.append((nested, value, path))
            return nested
        return value
