# -*- coding: utf-8 -*-
"""Location: ./testbackend/utils/headers.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Request header reflection for /util/headers.

Multi-valued headers are folded into a single value joined with ``", "``, the
field-line combination rule of RFC 9110 section 5.3. Values are not escaped,
so a value that itself contains a comma cannot be told apart from two values.
Header names are reported as they arrive from the ASGI server (lower case).
"""

# Standard
from typing import Dict, Iterable, List

# Third-Party
from starlette.datastructures import Headers

HEADER_VALUE_SEPARATOR = ", "


def join_header_values(values: Iterable[str]) -> str:
    """Fold several values of one header into a single string.

    Args:
        values: Header values in the order received.

    Returns:
        Values joined with ``", "``.

    Examples:
        >>> join_header_values(["a", "b"])
        'a, b'
        >>> join_header_values(["only"])
        'only'
    """
    return HEADER_VALUE_SEPARATOR.join(values)


def reflect_headers(headers: Headers) -> Dict[str, str]:
    """Convert request headers to a one-value-per-name mapping.

    Args:
        headers: Starlette request headers.

    Returns:
        Mapping of header name to (joined) value, in first-seen order.

    Examples:
        >>> h = Headers(raw=[(b"accept", b"text/html"), (b"x-tag", b"a"), (b"x-tag", b"b")])
        >>> reflect_headers(h)
        {'accept': 'text/html', 'x-tag': 'a, b'}
    """
    grouped: Dict[str, List[str]] = {}
    for name, value in headers.items():
        grouped.setdefault(name, []).append(value)
    return {name: join_header_values(values) for name, values in grouped.items()}
