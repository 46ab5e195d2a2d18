"""Collapse multi-valued HTTP headers into the collector's one-value schema."""

from typing import Dict, Mapping, Sequence, Union

import httpx


HeaderCollection = Union[httpx.Headers, Mapping[str, Sequence[str]]]


def normalize_headers(headers: HeaderCollection) -> Dict[str, str]:
    """
    Keep the first value of every header name.

    The collector stores a single value per header, so any further values
    are dropped. Key casing is left exactly as received.

    Args:
        headers: httpx headers or a mapping of name to ordered values

    Returns:
        Dict[str, str]: Header name to its first value
    """
    result: Dict[str, str] = {}

    if isinstance(headers, httpx.Headers):
        # .raw keeps the as-sent casing, .items() would lower-case it.
        # Names still compare case-insensitively; the first spelling seen is kept.
        seen = set()
        for raw_key, raw_value in headers.raw:
            if raw_key.lower() in seen:
                continue
            seen.add(raw_key.lower())
            result[raw_key.decode(headers.encoding)] = raw_value.decode(headers.encoding)
        return result

    for key, values in headers.items():
        if isinstance(values, str):
            result[key] = values
        elif values:
            result[key] = values[0]

    return result
