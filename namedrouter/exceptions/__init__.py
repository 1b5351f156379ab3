"""
Exceptions Package
Route naming and path building errors
"""
from namedrouter.exceptions.custom import (
    FrameworkException,
    RouteDefinitionException,
    RouteException,
    NoRouteDefined,
    RouteParameterNotSet,
    UnknownRouteParameter,
)

__all__ = [
    'FrameworkException',
    'RouteDefinitionException',
    'RouteException',
    'NoRouteDefined',
    'RouteParameterNotSet',
    'UnknownRouteParameter',
]
