"""
Routing Package
Named routes, the name registry and router adapters
"""
from namedrouter.routing.adapter import RouterAdapter
from namedrouter.routing.named_route import NamedRoute
from namedrouter.routing.route_registry import RouteRegistry
from namedrouter.routing.route_template import RouteSegment, join_paths, parameter_names, parse_template
from namedrouter.routing.router import NamedGroup, NamedRouter, RouteRegistrar
from namedrouter.routing.sanic_router import SanicRouter, compile_uri

__all__ = [
    'NamedRouter',
    'NamedGroup',
    'NamedRoute',
    'RouteRegistrar',
    'RouteRegistry',
    'RouteSegment',
    'RouterAdapter',
    'SanicRouter',
    'compile_uri',
    'join_paths',
    'parameter_names',
    'parse_template',
]
