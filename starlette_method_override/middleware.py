"""
Override the method of a POST request with the one given in the `_method` query parameter.

Browsers submit HTML forms with GET or POST only, while an application may expose
routes under more specific verbs. Point the form at a URL carrying the desired verb:

    <form method="POST" action="/item/1?_method=DELETE">
        <button type="submit">Delete item</button>
    </form>

Only PUT, PATCH and DELETE are accepted, other values are ignored.
"""

from __future__ import annotations

import logging
import typing
from starlette.datastructures import QueryParams
from starlette.types import ASGIApp, Receive, Scope, Send

__all__ = ["QUERY_PARAM", "ALLOWED_METHODS", "override_method", "MethodOverrideMiddleware"]

QUERY_PARAM = "_method"
ALLOWED_METHODS = frozenset({"PUT", "PATCH", "DELETE"})

logger = logging.getLogger(__name__)


def override_method(method: str, query_string: typing.Union[bytes, str]) -> typing.Optional[str]:
    """Return the method the request should be dispatched with, or None to keep the current one."""
    if method != "POST" or not query_string:
        return None

    values = QueryParams(query_string).getlist(QUERY_PARAM)
    if not values:
        return None

    # the first occurrence wins
    override = values[0].upper()
    if override in ALLOWED_METHODS:
        return override
    return None


class MethodOverrideMiddleware:
    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return await self.app(scope, receive, send)

        new_method = override_method(scope["method"], scope.get("query_string", b""))
        if new_method is not None:
            logger.debug("Override %s %s with %s.", scope["method"], scope.get("path", ""), new_method)
            scope = {**scope, "method": new_method}

        await self.app(scope, receive, send)
