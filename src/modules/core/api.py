"""Request helpers shared by the catalog ViewSets."""

from __future__ import annotations

from typing import Any, Mapping

from rest_framework.exceptions import ParseError
from rest_framework.request import Request


def request_object(request: Request) -> Mapping[str, Any]:
    """Return the parsed body, which must be a JSON object (or form data).

    Raises:
        ParseError: the body parsed to a list or a scalar.
    """
    data = request.data
    if not isinstance(data, Mapping):
        raise ParseError("Request body must be a JSON object.")
    return data
