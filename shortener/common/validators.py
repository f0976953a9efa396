"""Validation utilities for the link shortener."""

import re
from urllib.parse import urlsplit
from typing import Any, Tuple

# RFC 3986: scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r'^[A-Za-z][A-Za-z0-9+.-]*$')
_CONTROL_RE = re.compile(r'[\x00-\x1f\x7f]')


def is_valid_url(url: Any) -> Tuple[bool, str]:
    """Validate an absolute URL.

    Any scheme the generic URL grammar accepts is allowed (not only
    http/https), but a host is required. There is no length limit, and
    spaces are allowed in the path, query and fragment; leading and trailing
    spaces are ignored for parsing. Control characters are rejected anywhere.

    Args:
        url: The value to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(url, str) or not url.strip():
        return False, "URL is required"

    if _CONTROL_RE.search(url):
        return False, "URL must not contain control characters"

    try:
        result = urlsplit(url.strip(" "))

        if not result.scheme or not _SCHEME_RE.match(result.scheme):
            return False, "URL must have a scheme (e.g. https://)"

        if not result.netloc or not result.hostname:
            return False, "URL must have a valid host"

        if " " in result.netloc:
            return False, "URL host must not contain spaces"

        # Raises ValueError for non-numeric or out-of-range ports
        result.port

        return True, ""

    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"
