"""JSON output for resolved query results.

Resolved graphs may be cyclic; a model reached again along its own path is
written as an {id, type} stub instead of being expanded.
"""

import json
import os
from typing import Any, TextIO

from contentfully.domain.constants import MODEL_ID, MODEL_TYPE
from contentfully.domain.models import QueryResult


def to_jsonable(value: Any, _path: frozenset = frozenset()) -> Any:
    """Copy a resolved graph into plain JSON data, cutting cycles."""
    if isinstance(value, dict):
        if id(value) in _path:
            return {k: value[k] for k in (MODEL_ID, MODEL_TYPE) if k in value}
        path = _path | {id(value)}
        return {str(k): to_jsonable(v, path) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item, _path) for item in value]
    return value


class JSONDumper:
    """Writes query results as JSON.

    Args:
        pretty: Indent output when True.
    """

    def __init__(self, pretty: bool = True):
        self.pretty = pretty

    def dumps(self, data: Any) -> str:
        if isinstance(data, QueryResult):
            data = {
                'items': data.items,
                'skip': data.skip,
                'limit': data.limit,
                'total': data.total,
            }
        return json.dumps(
            to_jsonable(data),
            indent=2 if self.pretty else None,
            ensure_ascii=False,
            default=str,
        )

    def write(self, data: Any, stream: TextIO) -> None:
        stream.write(self.dumps(data))
        stream.write('\n')

    def write_file(self, data: Any, path: str) -> None:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            self.write(data, f)
