# -*- coding: utf-8 -*-
"""Location: ./testbackend/utils/orjson_response.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

orjson-backed JSON response.

``Decimal`` values are written as JSON numbers in fixed-point notation with
their scale intact, so ``Decimal("494.50")`` goes out as ``494.50`` rather
than ``494.5`` or ``"494.50"``.
"""

# Standard
from decimal import Decimal
from typing import Any

# Third-Party
import orjson
from starlette.responses import JSONResponse


def orjson_default(obj: Any) -> Any:
    """Serialize types orjson does not handle natively.

    Args:
        obj: Object orjson could not serialize.

    Returns:
        A raw JSON fragment for ``Decimal`` values.

    Raises:
        TypeError: For any other type.

    Examples:
        >>> orjson.dumps({"price": Decimal("494.50")}, default=orjson_default)
        b'{"price":494.50}'
        >>> orjson.dumps(Decimal("1E+2"), default=orjson_default)
        b'100'
    """
    if isinstance(obj, Decimal):
        return orjson.Fragment(format(obj, "f"))
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


class ORJSONResponse(JSONResponse):
    """JSON response rendered with orjson.

    Examples:
        >>> ORJSONResponse(content={"price": Decimal("3.10")}).body
        b'{"price":3.10}'
    """

    media_type = "application/json"

    def render(self, content: Any) -> bytes:
        """Render content to JSON bytes using orjson.

        Args:
            content: The content to serialize to JSON.

        Returns:
            JSON bytes ready for HTTP response.
        """
        return orjson.dumps(content, default=orjson_default, option=orjson.OPT_NON_STR_KEYS)
