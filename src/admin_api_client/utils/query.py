from collections.abc import Mapping
from typing import List, Optional, Tuple
from urllib.parse import urlencode

from ..types import SearchParamField, SearchParams


def _format_scalar(value: SearchParamField) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _append_params(pairs: List[Tuple[str, str]], key: str, value: SearchParamField) -> None:
    if value is None:
        return
    if isinstance(value, (list, tuple)):
        for item in value:
            _append_params(pairs, f"{key}[]", item)
    elif isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            _append_params(pairs, f"{key}[{sub_key}]", sub_value)
    else:
        pairs.append((key, _format_scalar(value)))


def serialize_params(params: Optional[SearchParams]) -> str:
    """Serialize nested search params into a query string.

    Lists become repeated ``key[]`` entries and mappings become ``key[sub]``
    entries, keeping the caller's ordering at every level.

    >>> serialize_params({"ids": [1, 2], "filter": {"status": "open"}})
    '?ids%5B%5D=1&ids%5B%5D=2&filter%5Bstatus%5D=open'
    >>> serialize_params({})
    ''
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in (params or {}).items():
        _append_params(pairs, key, value)

    query_string = urlencode(pairs)
    return f"?{query_string}" if query_string else ""
