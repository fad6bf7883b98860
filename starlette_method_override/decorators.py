from starlette.types import ASGIApp

from starlette_method_override.middleware import MethodOverrideMiddleware


def method_override(app: ASGIApp) -> MethodOverrideMiddleware:
    """
    Wrap an ASGI application with method override support.

    Usage:
        @method_override
        async def app(scope, receive, send): ...
    """
    return MethodOverrideMiddleware(app)
