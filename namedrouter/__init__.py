"""
namedrouter
Named routes and reverse path building on top of an HTTP router

Usage:
    from sanic import Sanic
    from namedrouter import NamedRouter, SanicRouter

    router = NamedRouter(SanicRouter(Sanic('MyApp')))
    router.get('user', '/user/:id', show_user)

    router.reverse('user').with_parameter('id', 3).path()  # '/user/3'
"""
from namedrouter.exceptions import (
    FrameworkException,
    NoRouteDefined,
    RouteDefinitionException,
    RouteException,
    RouteParameterNotSet,
    UnknownRouteParameter,
)
from namedrouter.http import UrlGenerator
from namedrouter.routing import (
    NamedGroup,
    NamedRoute,
    NamedRouter,
    RouteRegistry,
    RouterAdapter,
    SanicRouter,
)

__all__ = [
    'NamedRouter',
    'NamedGroup',
    'NamedRoute',
    'RouteRegistry',
    'RouterAdapter',
    'SanicRouter',
    'UrlGenerator',
    'FrameworkException',
    'RouteDefinitionException',
    'RouteException',
    'NoRouteDefined',
    'RouteParameterNotSet',
    'UnknownRouteParameter',
]
