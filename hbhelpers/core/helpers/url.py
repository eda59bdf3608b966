"""
URL helpers.
"""
from typing import Any, Optional
from urllib.parse import parse_qs, urlsplit

from hbhelpers.exceptions import ValidationError


def is_valid_url(value: str) -> bool:
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc)


def get_url_query_param(url: Any, key: Any) -> Optional[str]:
    """Returns the first value of query parameter `key` in `url`, or None."""
    if not isinstance(url, str) or not is_valid_url(url):
        raise ValidationError("Invalid URL passed to getURLQueryParam")
    if not isinstance(key, str):
        raise ValidationError("Invalid query parameter key passed to getURLQueryParam")
    params = parse_qs(urlsplit(url).query, keep_blank_values=True)
    values = params.get(key)
    return values[0] if values else None
