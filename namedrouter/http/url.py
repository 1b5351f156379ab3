"""
URL Generator
Generates paths and URLs from named routes (Laravel-style)
"""
from typing import Any, Dict, Optional, TYPE_CHECKING

from namedrouter import defaults
from namedrouter.support import Config

if TYPE_CHECKING:
    from namedrouter.routing.router import NamedRouter


class UrlGenerator:
    """
    Usage:
        generator = UrlGenerator(router)
        generator.route('users.show', {'id': 1})                 # /users/1

        generator.force_root_url('https://example.org')
        generator.route('users.show', {'id': 1}, absolute=True)  # https://example.org/users/1
    """

    def __init__(self, router: 'NamedRouter'):
        """
        Args:
            router: Router whose named routes are used
        """
        self.router = router
        self._forced_root: Optional[str] = None

    def route(self, name: str, parameters: Optional[Dict[str, Any]] = None, absolute: bool = False) -> str:
        """
        Generate the path or URL for a named route

        Args:
            name: Route name
            parameters: Route parameters, all of which must be used by the route
            absolute: Prefix the root URL

        Returns:
            Path or URL string

        Raises:
            NoRouteDefined, RouteParameterNotSet, UnknownRouteParameter
        """
        return self.to(self.router.route(name, parameters), absolute)

    def to(self, path: str, absolute: bool = False) -> str:
        """
        Generate a path or URL for a literal path

        Args:
            path: URI path, a leading '/' is added when missing
            absolute: Prefix the root URL
        """
        if not path.startswith('/'):
            path = '/' + path

        if absolute:
            return f"{self.root_url()}{path}"
        return path

    def root_url(self) -> str:
        """Forced root URL, else config app.URL, else an empty string"""
        if self._forced_root is not None:
            return self._forced_root
        return str(Config.get('app.URL', defaults.DEFAULT_APP_URL) or '').rstrip('/')

    def force_root_url(self, root: str):
        """
        Force root URL for generated URLs

        Args:
            root: Root URL (e.g., 'https://example.com')
        """
        self._forced_root = root.rstrip('/')

    def is_valid_url(self, path: str) -> bool:
        """Check if a path is already an absolute URL"""
        return path.startswith(('http://', 'https://', '//'))
