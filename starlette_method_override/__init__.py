from starlette.middleware import Middleware

from starlette_method_override.decorators import method_override
from starlette_method_override.middleware import (
    ALLOWED_METHODS,
    QUERY_PARAM,
    MethodOverrideMiddleware,
    override_method,
)

__all__ = [
    "Middleware",
    "MethodOverrideMiddleware",
    "method_override",
    "override_method",
    "QUERY_PARAM",
    "ALLOWED_METHODS",
]
