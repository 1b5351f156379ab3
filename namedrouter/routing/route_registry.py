"""
Route Registry
Maps route names to absolute route templates
"""
import threading
from typing import Dict, Iterator, List, Optional

from namedrouter import defaults
from namedrouter.logging import getLogger
from namedrouter.routing.route_template import parameter_names
from namedrouter.support import Config

logger = getLogger(__name__)


class RouteRegistry:
    """
    Name -> template mapping shared by a router and all of its groups

    Registering an existing name replaces its template. Names are never
    removed. Reads and writes are guarded by a lock so registration from
    several threads cannot corrupt the mapping.

    Usage:
        registry = RouteRegistry()
        registry.register('users.show', '/users/:id')
        registry.resolve('users.show')  # '/users/:id'
        registry.resolve('missing')     # ''
    """

    def __init__(self):
        """Initialize an empty registry"""
        self._lock = threading.Lock()
        self._routes: Dict[str, str] = {}

    def register(self, name: str, template: str) -> str:
        """
        Store a template under a name

        Args:
            name: Route name (any string)
            template: Absolute route template

        Returns:
            The stored template
        """
        with self._lock:
            previous = self._routes.get(name)
            self._routes[name] = template

        if previous is not None and previous != template:
            warn = Config.get(
                'routing.WARN_ON_DUPLICATE_NAMES',
                defaults.DEFAULT_WARN_ON_DUPLICATE_NAMES,
            )
            log = logger.warning if warn else logger.debug
            log(
                "Route name [%s] redefined: %s -> %s", name, previous, template,
                extra={'route_name': name, 'template': template},
            )
        else:
            logger.debug(
                "Route [%s] registered: %s", name, template,
                extra={'route_name': name, 'template': template},
            )

        return template

    def resolve(self, name: str) -> str:
        """Template registered under name, or an empty string"""
        return self.get(name, '')

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        with self._lock:
            return self._routes.get(name, default)

    def has(self, name: str) -> bool:
        """Check if a named route exists"""
        with self._lock:
            return name in self._routes

    def names(self) -> List[str]:
        """Registered route names, in registration order"""
        with self._lock:
            return list(self._routes)

    def to_dict(self) -> Dict[str, Dict[str, object]]:
        """
        Snapshot of the registry for introspection

        Returns:
            {name: {'uri': template, 'parameters': [names]}}
        """
        with self._lock:
            routes = dict(self._routes)

        return {
            name: {'uri': template, 'parameters': parameter_names(template)}
            for name, template in routes.items()
        }

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        with self._lock:
            return len(self._routes)

    def __repr__(self):
        return f"<RouteRegistry ({len(self)} routes)>"
