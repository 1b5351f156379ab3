"""
Sanic Router Adapter
Registers named-router paths with a Sanic app or blueprint
"""
import inspect
import re
from functools import wraps
from typing import Any, Callable, Sequence, Set, Union

from sanic import Blueprint, Sanic

from namedrouter.exceptions import RouteDefinitionException
from namedrouter.logging import getLogger
from namedrouter.routing.adapter import RouterAdapter
from namedrouter.routing.route_template import LITERAL, WILDCARD, classify_segment, join_paths

logger = getLogger(__name__)

# Attribute on the Sanic target's ctx holding generated route names
ROUTE_NAMES_ATTRIBUTE = 'namedrouter_route_names'


def compile_uri(path: str) -> str:
    """
    Convert a ``:param`` / ``*param`` path to Sanic syntax

    Examples::

        "/user/:id"     -> "/user/<id>"
        "/item/*splat"  -> "/item/<splat:path>"
        "/about/us"     -> "/about/us"
    """
    def convert(part: str) -> str:
        if not part:
            return part
        segment = classify_segment(part)
        if segment.kind == LITERAL:
            return part
        if segment.kind == WILDCARD:
            return f"<{segment.parameter_name}:path>"
        return f"<{segment.parameter_name}>"

    return '/'.join(convert(part) for part in path.split('/'))


def wrap_handler(handler: Callable, middleware: Sequence[Callable]) -> Callable:
    """
    Run middleware before a handler

    Each middleware is called with the request. Returning anything other
    than None stops the chain and that value becomes the response.
    Middleware and handler may be sync or async.
    """
    if not middleware:
        return handler

    @wraps(handler)
    async def wrapper(request, *args, **kwargs):
        for before in middleware:
            result = before(request)
            if inspect.isawaitable(result):
                result = await result
            if result is not None:
                return result

        response = handler(request, *args, **kwargs)
        if inspect.isawaitable(response):
            response = await response
        return response

    return wrapper


class SanicRouter(RouterAdapter):
    """
    RouterAdapter over a Sanic app or blueprint

    Groups do not create blueprints; they register on the same target
    with the joined prefix and the accumulated group handlers.

    Usage:
        app = Sanic('MyApp')
        router = NamedRouter(SanicRouter(app))
        router.get('user', '/user/:id', show_user)
    """

    def __init__(
        self,
        target: Union[Sanic, Blueprint],
        prefix: str = '/',
        middleware: Sequence[Callable] = (),
    ):
        """
        Args:
            target: Sanic app or blueprint receiving the routes
            prefix: Path prefix of this router or group
            middleware: Handlers run before every route's own handlers
        """
        self.target = target
        self.prefix = prefix
        self.middleware = tuple(middleware)

    def add_route(self, method: str, path: str, *handlers: Callable[..., Any]) -> Any:
        """
        Register the handler chain with Sanic

        The last handler is the endpoint; the group's handlers and any
        preceding handlers run before it as middleware.
        """
        uri = compile_uri(join_paths(self.prefix, path))

        if not handlers:
            raise RouteDefinitionException(f"{method} {uri}: at least one handler is required")

        *before, endpoint = handlers
        handler = wrap_handler(endpoint, self.middleware + tuple(before))
        route_name = self._unique_name(method, uri)

        logger.debug(
            "Registering %s %s with Sanic as [%s]", method, uri, route_name,
            extra={'sanic_route_name': route_name},
        )
        return self.target.add_route(handler, uri, methods=[method], name=route_name)

    def group(self, prefix: str, *handlers: Callable[..., Any]) -> 'SanicRouter':
        return SanicRouter(
            self.target,
            join_paths(self.prefix, prefix),
            self.middleware + handlers,
        )

    @property
    def route_names(self) -> Set[str]:
        """
        Sanic route names generated on the target so far

        Kept on the target's ctx so every adapter registering on the same
        app or blueprint draws from one set of names.
        """
        names = getattr(self.target.ctx, ROUTE_NAMES_ATTRIBUTE, None)
        if names is None:
            names = set()
            setattr(self.target.ctx, ROUTE_NAMES_ATTRIBUTE, names)
        return names

    def _unique_name(self, method: str, uri: str) -> str:
        """Sanic route name derived from method and URI, deduplicated per target"""
        base = re.sub(r'[^0-9a-zA-Z]+', '_', f"{method}_{uri}").strip('_').lower()
        taken = self.route_names
        name = base
        counter = 2
        while name in taken:
            name = f"{base}_{counter}"
            counter += 1
        taken.add(name)
        return name
