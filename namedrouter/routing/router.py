"""
Named Router
Names routes registered with an underlying HTTP router and rebuilds
their paths from the name and parameter values
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, Optional

from namedrouter.defaults import HTTP_METHODS
from namedrouter.routing.adapter import RouterAdapter
from namedrouter.routing.named_route import NamedRoute
from namedrouter.routing.route_registry import RouteRegistry
from namedrouter.routing.route_template import join_paths


class RouteRegistrar(ABC):
    """
    Registration entry points shared by NamedRouter and NamedGroup

    Every registration forwards (relative path, handlers) to the underlying
    router or group, then stores name -> absolute template in the shared
    registry. A name is only recorded once the route exists.
    """

    def __init__(self, registry: RouteRegistry, engine: RouterAdapter):
        self.registry = registry
        self.engine = engine

    @abstractmethod
    def _absolute(self, uri: str) -> str:
        """Template stored in the registry for a relative uri"""

    def add_route(self, method: str, name: str, uri: str, *handlers: Callable[..., Any]):
        """
        Name a route and register it with the underlying router

        Args:
            method: HTTP method, one of HTTP_METHODS
            name: Route name; an existing name is replaced
            uri: Route path relative to this router or group
            *handlers: Handlers, passed through unchanged
        """
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        getattr(self.engine, method.lower())(uri, *handlers)
        self.registry.register(name, self._absolute(uri))

    # =========================================================================
    # Route Registration Methods
    # =========================================================================

    def get(self, name: str, uri: str, *handlers: Callable[..., Any]):
        """Register a named GET route"""
        self.add_route('GET', name, uri, *handlers)

    def post(self, name: str, uri: str, *handlers: Callable[..., Any]):
        """Register a named POST route"""
        self.add_route('POST', name, uri, *handlers)

    def put(self, name: str, uri: str, *handlers: Callable[..., Any]):
        """Register a named PUT route"""
        self.add_route('PUT', name, uri, *handlers)

    def patch(self, name: str, uri: str, *handlers: Callable[..., Any]):
        """Register a named PATCH route"""
        self.add_route('PATCH', name, uri, *handlers)

    def delete(self, name: str, uri: str, *handlers: Callable[..., Any]):
        """Register a named DELETE route"""
        self.add_route('DELETE', name, uri, *handlers)

    def head(self, name: str, uri: str, *handlers: Callable[..., Any]):
        """Register a named HEAD route"""
        self.add_route('HEAD', name, uri, *handlers)

    def options(self, name: str, uri: str, *handlers: Callable[..., Any]):
        """Register a named OPTIONS route"""
        self.add_route('OPTIONS', name, uri, *handlers)

    def match(self, methods: Iterable[str], name: str, uri: str, *handlers: Callable[..., Any]):
        """
        Register one named route for several HTTP methods

        Usage:
            router.match(['GET', 'POST'], 'contact', '/contact', handler)
        """
        for method in methods:
            self.add_route(method, name, uri, *handlers)

    def any(self, name: str, uri: str, *handlers: Callable[..., Any]):
        """Register a named route for every supported HTTP method"""
        self.match(HTTP_METHODS, name, uri, *handlers)

    # =========================================================================
    # Route Grouping
    # =========================================================================

    def group(self, prefix: str, *handlers: Callable[..., Any]) -> 'NamedGroup':
        """
        Create a group registering routes under a path prefix

        Args:
            prefix: Prefix relative to this router or group
            *handlers: Group handlers, passed to the underlying group

        Usage:
            api = router.group('/api')
            v1 = api.group('v1')
            v1.post('v1-submit', '/submit', handler)  # stored as /api/v1/submit
        """
        return NamedGroup(
            self.registry,
            self.engine.group(prefix, *handlers),
            join_paths(self._base_path(), prefix),
        )

    @abstractmethod
    def _base_path(self) -> str:
        """Prefix new groups are joined onto"""


class NamedRouter(RouteRegistrar):
    """
    Router with named routes, wrapping an underlying HTTP router

    Usage:
        router = NamedRouter(SanicRouter(app))
        router.get('root', '/', home)
        router.get('user', '/user/:id', show_user)

        router.reverse('user').with_parameter('id', 3).path()  # '/user/3'
        router.route('user', {'id': 3})                        # '/user/3'
    """

    def __init__(self, engine: RouterAdapter, registry: Optional[RouteRegistry] = None):
        """
        Args:
            engine: Underlying router the routes are registered with
            registry: Name registry; a new one is created when omitted
        """
        super().__init__(registry if registry is not None else RouteRegistry(), engine)

    def _absolute(self, uri: str) -> str:
        # Registered at the root, so the path is already absolute
        return uri

    def _base_path(self) -> str:
        return '/'

    # =========================================================================
    # Route Resolution
    # =========================================================================

    def reverse(self, name: str) -> NamedRoute:
        """
        Look up a named route

        Never fails: an unknown name yields a handle whose path() raises
        NoRouteDefined.
        """
        return NamedRoute(name=name, route=self.registry.resolve(name))

    def route(self, name: str, parameters: Optional[Dict[str, Any]] = None) -> str:
        """
        Build the path for a named route in one call

        Usage:
            router.route('user-item', {'id': 3, 'item': 'book'})  # '/user/3/item/book'
        """
        return self.reverse(name).with_parameters(parameters).path()

    def has(self, name: str) -> bool:
        """Check if a named route exists"""
        return self.registry.has(name)

    def get_routes(self) -> Dict[str, str]:
        """All named routes as {name: template}"""
        return {name: info['uri'] for name, info in self.registry.to_dict().items()}

    def __repr__(self):
        return f"<NamedRouter ({len(self.registry)} named routes)>"


class NamedGroup(RouteRegistrar):
    """
    Prefix-scoped registration context

    Created by NamedRouter.group() or NamedGroup.group(). Stores absolute
    templates in the router's registry and forwards relative paths to the
    underlying group.
    """

    def __init__(self, registry: RouteRegistry, engine: RouterAdapter, prefix: str):
        super().__init__(registry, engine)
        self.prefix = prefix

    def _absolute(self, uri: str) -> str:
        return join_paths(self.prefix, uri)

    def _base_path(self) -> str:
        return self.prefix

    def __repr__(self):
        return f"<NamedGroup {self.prefix}>"
