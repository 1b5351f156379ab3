"""
Custom Exception Classes
Route naming and path building exceptions
"""
from typing import Optional


class FrameworkException(Exception):
    """Base exception for all namedrouter exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class RouteDefinitionException(FrameworkException):
    """
    Invalid route definition

    Raised by a router adapter when a route cannot be handed to the
    underlying HTTP router

    Example:
        raise RouteDefinitionException("GET /users: at least one handler is required")
    """
    message = "Invalid route definition"


class RouteException(FrameworkException):
    """
    Base class for path building errors

    Subclasses carry the offending route or parameter name and compare
    equal when class and payload match.
    """
    message = "Unable to build route path"

    def _payload(self):
        return ()

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._payload() == other._payload()

    def __hash__(self):
        return hash((type(self), self._payload()))


class NoRouteDefined(RouteException):
    """
    No route is registered under the requested name

    Example:
        raise NoRouteDefined('users.show')
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Route [{name}] not defined")

    def _payload(self):
        return (self.name,)


class RouteParameterNotSet(RouteException):
    """
    A placeholder in the route template has no bound value

    Example:
        raise RouteParameterNotSet('id')
    """

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"Route parameter [{parameter}] not set")

    def _payload(self):
        return (self.parameter,)


class UnknownRouteParameter(RouteException):
    """
    A bound value matches no placeholder in the route template

    Example:
        raise UnknownRouteParameter('item')
    """

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"Route parameter [{parameter}] is not used by the route")

    def _payload(self):
        return (self.parameter,)
