"""
Named Route
A reverse-lookup handle: route name, resolved template and bound parameters
"""
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional

from namedrouter.defaults import PARAMETER_MARKER, WILDCARD_MARKER
from namedrouter.exceptions import NoRouteDefined, RouteParameterNotSet, UnknownRouteParameter
from namedrouter.logging import getLogger

logger = getLogger(__name__)

_PLACEHOLDER_MARKERS = (PARAMETER_MARKER, WILDCARD_MARKER)


@dataclass(frozen=True)
class NamedRoute:
    """
    Reverse-lookup handle created by ``NamedRouter.reverse()``

    The handle is immutable: ``with_parameter()`` returns a new handle and
    ``path()`` never changes the bindings, so a handle can be shared and
    rendered any number of times.

    Usage:
        path = router.reverse('user-item').with_parameter('id', 3).with_parameter('item', 'book').path()
        # '/user/3/item/book'
    """

    name: str
    route: str = ''
    parameters: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'parameters', MappingProxyType(dict(self.parameters)))

    def __hash__(self):
        return hash((self.name, self.route, frozenset(self.parameters.items())))

    def with_parameter(self, key: str, value: Any) -> 'NamedRoute':
        """
        Bind a value to a route parameter

        Args:
            key: Parameter name, without its ':' or '*' marker
            value: Parameter value (converted with str())

        Returns:
            A new handle with the binding added; the last value for a key wins
        """
        return replace(self, parameters={**self.parameters, key: str(value)})

    def with_parameters(self, parameters: Optional[Mapping[str, Any]] = None, **kwargs) -> 'NamedRoute':
        """
        Bind several values at once

        Usage:
            route.with_parameters({'id': 3}, item='book')
        """
        bound = dict(self.parameters)
        for key, value in {**(parameters or {}), **kwargs}.items():
            bound[key] = str(value)
        return replace(self, parameters=bound)

    def path(self) -> str:
        """
        Build the absolute path for the route

        Every placeholder is replaced with its bound value, verbatim. The
        result starts with a single '/' and keeps the template's segment
        order; the domain and scheme are not included.

        Returns:
            The path, e.g. '/user/3'

        Raises:
            NoRouteDefined: No route is registered under the name
            RouteParameterNotSet: A placeholder has no bound value
            UnknownRouteParameter: A bound value was not used by any placeholder
        """
        if not self.route:
            logger.debug("Path for undefined route [%s] requested", self.name)
            raise NoRouteDefined(self.name)

        remaining = dict(self.parameters)
        parts = self.route.split('/')
        last_index = len(parts) - 1
        url = ['/']

        for index, part in enumerate(parts):
            if not part:
                continue

            if part[:1] in _PLACEHOLDER_MARKERS:
                parameter = part[1:]
                if parameter not in remaining:
                    logger.debug("Route [%s] is missing parameter [%s]", self.name, parameter)
                    raise RouteParameterNotSet(parameter)
                # Consumed so leftovers can be reported below
                url.append(remaining.pop(parameter))
            else:
                url.append(part)

            if index < last_index:
                url.append('/')

        if remaining:
            unused = next(iter(remaining))
            logger.debug("Route [%s] was given unused parameter [%s]", self.name, unused)
            raise UnknownRouteParameter(unused)

        return ''.join(url)
